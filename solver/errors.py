"""Exceptions raised before a solve can start (bad input, unknown puzzle names)."""


class SudokuError(Exception):
    pass


class GridFormatError(SudokuError, ValueError):
    """Input could not be read as 81 digits in 0..9."""


class UnknownPuzzleError(SudokuError, KeyError):
    def __init__(self, name: str, known: list[str]):
        super().__init__(name)
        self.name = name
        self.known = known

    def __str__(self) -> str:
        return f"unknown puzzle name {self.name!r}"

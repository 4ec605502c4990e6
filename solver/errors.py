"""Error types raised by the board layer. Construction never prints; callers decide how to report."""


class SudokuError(ValueError):
    default_message = "Invalid Sudoku input"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidBoardShape(SudokuError):
    default_message = "Board must be a 9x9 grid"


class InvalidDigit(SudokuError):
    default_message = "Digits must be integers between 0 and 9"


class InvalidPosition(SudokuError):
    default_message = "Position must be (row, col) with both in 0..8"

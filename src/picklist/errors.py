"""Errors raised by the selection engines."""


class SelectionError(Exception):
    """Base class for everything a selection run can end with besides a result."""

    pass


class EmptyListError(SelectionError):
    """Raised when there is nothing to choose from.

    Checked before the terminal is touched.
    """

    def __init__(self) -> None:
        super().__init__("No items to select from")


class NotATerminalError(SelectionError):
    """Raised when the key source is not an interactive terminal."""

    def __init__(self) -> None:
        super().__init__("Input is not a terminal")


class SelectionCanceled(SelectionError):
    """Raised when the user cancels the selection.

    This is a normal outcome, not a failure.
    """

    def __init__(self) -> None:
        super().__init__("Canceled")


class TerminalIOError(SelectionError):
    """Raised when reading keys or drawing fails.

    The underlying OSError is kept as __cause__.
    """

    pass

from typing import Optional


class CompileError(Exception):
    """Base for every failure that aborts a compilation run.

    ``location`` is the index into the source expression the error points at,
    or None when the failure is not tied to a position.
    """

    def __init__(self, message: str, location: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location


class UsageError(CompileError):
    pass


class LexError(CompileError):
    pass


class ParseError(CompileError):
    pass

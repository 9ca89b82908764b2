from typing import ClassVar


class CompileError(Exception):
    """
    Raised when a pattern cannot be compiled into an automaton.

    Args:
        pattern: The pattern being compiled.
        position: Index (in code points) of the cursor when the error was found.
    """

    message: ClassVar[str] = "invalid pattern"

    def __init__(self, pattern: str, position: int) -> None:
        super().__init__(pattern, position)
        self.pattern = pattern
        self.position = position

    def __str__(self) -> str:
        return f"{self.message} at position {self.position}"


class EmptyExpression(CompileError):
    message = "expected expression"


class UnexpectedToken(CompileError):
    message = "unexpected token"


class UnclosedGroup(CompileError):
    message = "expected ')'"


class TrailingInput(CompileError):
    message = "unexpected trailing characters"

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorInfo:
    """Describes a PlayScript error: a category name, a message and,
    when known, the source position it was detected at."""
    name: str
    message: str
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        text = f"{self.name}: {self.message}"
        if self.line is not None:
            text += f" at {self.line}:{self.column}"
        return text


class PlayScriptError(Exception):
    """Exception type used to propagate fatal PlayScript errors."""
    name = 'Error'

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.err = ErrorInfo(self.name, message, line, column)
        super().__init__(str(self.err))


class LexerError(PlayScriptError):
    name = 'LexicalError'


class ParseError(PlayScriptError):
    name = 'SyntaxError'


class ResolveError(PlayScriptError):
    name = 'BindingError'


class ExecutionError(PlayScriptError):
    name = 'RuntimeError'


class TryNext(Exception):
    """Internal signal for the backtracking parser to try the next rule."""
    def __init__(self, rule: str):
        super().__init__(rule)
        self.rule = rule

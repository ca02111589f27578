from typing import Iterator, Optional


class CharStream:
    """One-character lookahead over source text with line/column tracking.

    ``line`` starts at 1 and ``column`` at 0; consuming a newline moves to
    the next line and resets the column, any other character advances the
    column by one. The stream never rewinds.
    """
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def next(self) -> Optional[str]:
        ch = self.peek()
        if ch is None:
            return None
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return ch

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        ch = self.next()
        if ch is None:
            raise StopIteration
        return ch

"""Explicit scan position over the lines of an outline block."""

from collections.abc import Sequence


class LineCursor:
    """Walk forward over a sequence of lines.

    Parsing rules receive the cursor positioned on the line they have to handle and \
    are responsible for advancing it past every line they consume. This keeps each \
    rule testable on its own: set up a cursor at some line, apply the rule, check the \
    emitted block and the new position.
    """

    def __init__(self, lines: Sequence[str], position: int = 0) -> None:
        self._lines = lines
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._lines)

    def peek(self) -> str:
        """Return the current line without consuming it.

        Raises:
            IndexError: Raised if the cursor is exhausted.
        """
        return self._lines[self._position]

    def advance(self) -> str:
        """Consume the current line and return it.

        Raises:
            IndexError: Raised if the cursor is exhausted.
        """
        line = self._lines[self._position]
        self._position += 1
        return line

    def skip_blank(self) -> None:
        while not self.exhausted and not self.peek().strip():
            self._position += 1

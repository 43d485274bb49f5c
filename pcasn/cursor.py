"""
Forward-only line source.

``LineCursor`` wraps any iterable of text lines (an open file, a list,
a whole string) and hands out logical lines one by one. It can look
at the next line without consuming it, but it can never go back.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from .exceptions import StreamError
from .tokens import split_structural


class LineCursor:
    """Peek/advance access to a stream of lines.

    Line terminators are removed. With ``reflow`` enabled each physical line
    is further split into logical lines at structural characters (see
    :func:`pcasn.tokens.split_structural`).

    Reading errors of the underlying stream (``OSError``,
    ``UnicodeDecodeError``) surface as :class:`StreamError`.

    Example:
        >>> cursor = LineCursor.from_text("atoms {\\n}")
        >>> cursor.peek()
        'atoms {'
        >>> cursor.advance()
        'atoms {'
        >>> cursor.advance()
        '}'
        >>> cursor.advance() is None
        True
    """

    __slots__ = ("_source", "_pending", "_line_number", "_reflow", "_in_string", "_exhausted")

    def __init__(self, lines: Iterable[str], *, reflow: bool = False) -> None:
        if isinstance(lines, str):
            lines = lines.splitlines()
        self._source: Iterator[str] = iter(lines)
        self._pending: deque[str] = deque()
        self._line_number = 0
        self._reflow = reflow
        self._in_string = False
        self._exhausted = False

    @classmethod
    def from_text(cls, text: str, *, reflow: bool = False) -> "LineCursor":
        """Create a cursor over an in-memory string."""
        return cls(text.splitlines(), reflow=reflow)

    @property
    def line_number(self) -> int:
        """Physical line number (1-based) of the last line read, 0 before any."""
        return self._line_number

    def _fill(self) -> bool:
        """Read physical lines until a logical line is pending.

        Returns:
            False once the source is exhausted and nothing is pending.
        """
        while not self._pending:
            if self._exhausted:
                return False
            try:
                raw = next(self._source)
            except StopIteration:
                self._exhausted = True
                return False
            except (OSError, UnicodeDecodeError) as exc:
                raise StreamError(
                    "An IO error occurred while reading the input",
                    self._line_number,
                ) from exc

            self._line_number += 1
            raw = raw.rstrip("\r\n")
            if self._reflow:
                pieces, self._in_string = split_structural(raw, self._in_string)
                self._pending.extend(pieces)
            else:
                self._pending.append(raw)
        return True

    def peek(self) -> str | None:
        """Look at the next line without consuming it.

        Returns:
            The next line, or None if the input is exhausted.
        """
        if not self._fill():
            return None
        return self._pending[0]

    def advance(self) -> str | None:
        """Consume and return the next line.

        Returns:
            The next line, or None if the input is exhausted.
        """
        if not self._fill():
            return None
        return self._pending.popleft()

    def is_eof(self) -> bool:
        """Check if every line has been consumed."""
        return not self._fill()

    def __iter__(self) -> Iterator[str]:
        """Consume the remaining lines."""
        while True:
            line = self.advance()
            if line is None:
                return
            yield line

"""
Line-level token extraction for ASN text.

The reader never tokenizes a whole record. It looks at one line at a time
and asks three questions: does the line open a block (and under which
command keyword), does it close one, and what value does it carry.
"""

from __future__ import annotations

from typing import Final

OPEN_BRACE: Final[str] = "{"
CLOSE_BRACE: Final[str] = "}"
SEPARATOR: Final[str] = ","
QUOTE: Final[str] = '"'


def opens_block(line: str) -> bool:
    """Check if the line contains an opening brace."""
    return OPEN_BRACE in line


def closes_block(line: str) -> bool:
    """Check if the line contains a closing brace."""
    return CLOSE_BRACE in line


def extract_command(line: str) -> str | None:
    """Get the command keyword of a block-opening line.

    Args:
        line: A line of input.

    Returns:
        Text before the first ``{`` with surrounding whitespace trimmed,
        or None if the line has no ``{``.

    Example:
        >>> extract_command("  atoms {")
        'atoms'
        >>> extract_command("no brace here") is None
        True
    """
    head, brace, _ = line.partition(OPEN_BRACE)
    if not brace:
        return None
    return head.strip()


def extract_value(line: str) -> str:
    """Get the value carried by a line.

    Leading whitespace is dropped; everything after the first
    non-whitespace character is kept verbatim up to, not including, the
    first comma.

    Example:
        >>> extract_value("  12 ,")
        '12 '
    """
    return line.partition(SEPARATOR)[0].lstrip()


def normalize_symbol(value: str) -> str:
    """Turn an ASN element value into an element symbol.

    Only the first character is uppercased; the rest is left as is, so
    "cl" becomes "Cl" but "CL" stays "CL".
    """
    if len(value) == 1:
        return value.upper()
    return value[:1].upper() + value[1:]


def split_structural(line: str, in_string: bool = False) -> tuple[list[str], bool]:
    """Split a physical line into logical lines.

    A cut is made after every ``{`` and ``,`` and before every ``}``, so
    each logical line carries at most one brace. Characters between double
    quotes are never cut; a doubled quote (the ASN escape) toggles twice
    and is therefore transparent. Whitespace in front of a cut is dropped,
    so ``1 ,`` and ``1 }`` both yield the value ``1``. Blank pieces are
    dropped.

    Args:
        line: Physical line without its line terminator.
        in_string: Whether the line starts inside a quoted string.

    Returns:
        The logical lines and whether the line ends inside a quoted string.

    Example:
        >>> split_structural("aid { 1, 2 },")
        (['aid {', ' 1,', ' 2', '},'], False)
    """
    pieces: list[str] = []
    start = 0
    for i, char in enumerate(line):
        if char == QUOTE:
            in_string = not in_string
        elif in_string:
            continue
        elif char == OPEN_BRACE:
            pieces.append(line[start:i + 1])
            start = i + 1
        elif char == SEPARATOR:
            pieces.append(line[start:i].rstrip() + SEPARATOR)
            start = i + 1
        elif char == CLOSE_BRACE:
            pieces.append(line[start:i])
            start = i
    pieces.append(line[start:])

    logical = [piece.rstrip() for piece in pieces]
    return [piece for piece in logical if piece.strip()], in_string

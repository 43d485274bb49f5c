"""
Custom exceptions for the pcasn library.

This module defines a hierarchy of exceptions for handling errors raised
while reading PubChem Compound ASN records in a structured way.
"""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for all chemistry-related errors."""

    pass


class ReaderError(ChemError):
    """Error raised by a reader that cannot complete its job.

    Attributes:
        message: Description of what went wrong.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StreamError(ReaderError):
    """The underlying input could not be read any further.

    The underlying exception is chained as ``__cause__``.

    Attributes:
        line_number: Last physical line successfully read (1-based), 0 if none.
    """

    def __init__(self, message: str, line_number: int = 0) -> None:
        self.line_number = line_number
        super().__init__(message)


class ParseError(ChemError):
    """Error in the content of an ASN record.

    Attributes:
        message: Description of what went wrong.
        line: The offending logical line, if known.
        line_number: Physical line number (1-based) of the offending line.
    """

    def __init__(
        self,
        message: str,
        line: str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.line_number = line_number

        # Build detailed error message
        parts = [message]
        if line_number is not None:
            parts.append(f" (line {line_number})")
        if line is not None:
            parts.append(f"\n  {line.strip()}")

        super().__init__("".join(parts))


class IntegrityError(ParseError):
    """A bond endpoint references an atom id that was never declared.

    Attributes:
        atom_id: The unresolved atom identifier.
    """

    def __init__(
        self,
        atom_id: str,
        line: str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.atom_id = atom_id
        super().__init__(
            f"File is corrupt: atom ID does not exist {atom_id}",
            line,
            line_number,
        )

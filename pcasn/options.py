"""Reader configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReaderOptions:
    """Options controlling how ASN text is read.

    Attributes:
        reflow: Split physical lines into logical lines at structural
            characters, so that blocks written on a single line decode the
            same way as the one-value-per-line layout PubChem produces.
            When False, physical lines are used as they are.
        strict_braces: Count every brace when skipping an unrecognized
            block. When False a line counts at most once as opening and
            at most once as closing, however many braces it holds.
        encoding: Text encoding used when a reader opens a path.
    """

    reflow: bool = True
    strict_braces: bool = False
    encoding: str = "utf-8"

    def replace(self, **changes) -> "ReaderOptions":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = ReaderOptions()

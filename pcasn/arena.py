"""
Positional stores used while a record is decoded.

ASN lists every field of every atom in its own block, so the n-th value of
``aid`` and the n-th value of ``element`` must land on the same atom even
though they arrive in separate passes. ``EntityArena`` provides that
"get or create the entity at position n" access. ``AtomRegistry`` maps
the record's own atom identifiers to atoms so that bonds, which refer to
atoms by identifier, can be resolved.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, TypeVar

from .exceptions import IntegrityError
from .types import Atom

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityArena(Generic[T]):
    """Auto-growing, index-addressable sequence of entities.

    Growth policy: asking for position ``i`` grows the sequence to ``i + 1``
    entries, filling any gap with fresh placeholders built by ``factory``
    (which receives the position of the entity it creates). The backing list
    is shared, not copied, so entities created here appear in the molecule
    that owns the list.

    Example:
        >>> arena = EntityArena([], lambda i: Atom(i))
        >>> arena.get(2).idx
        2
        >>> len(arena)
        3
    """

    __slots__ = ("_items", "_factory")

    def __init__(self, items: list[T], factory: Callable[[int], T]) -> None:
        self._items = items
        self._factory = factory

    def get(self, index: int) -> T:
        """Get the entity at index, creating placeholders as needed.

        Raises:
            IndexError: If index is negative.
        """
        if index < 0:
            raise IndexError(f"Arena index must be non-negative, got {index}")
        while len(self._items) <= index:
            self._items.append(self._factory(len(self._items)))
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]


class AtomRegistry:
    """Lookup table from source atom identifier to atom.

    A redefined identifier replaces the earlier entry (last write wins).
    """

    __slots__ = ("_atoms",)

    def __init__(self) -> None:
        self._atoms: dict[str, Atom] = {}

    def register(self, atom_id: str, atom: Atom) -> None:
        previous = self._atoms.get(atom_id)
        if previous is not None and previous is not atom:
            logger.debug(
                "Atom ID %r redefined: atom %d replaces atom %d",
                atom_id, atom.idx, previous.idx,
            )
        self._atoms[atom_id] = atom

    def get(self, atom_id: str) -> Atom | None:
        return self._atoms.get(atom_id)

    def resolve(
        self,
        atom_id: str,
        line: str | None = None,
        line_number: int | None = None,
    ) -> Atom:
        """Get the atom registered under atom_id.

        Args:
            atom_id: Identifier to look up.
            line: Line the reference came from, for error reporting.
            line_number: Physical line number, for error reporting.

        Raises:
            IntegrityError: If no atom carries atom_id.
        """
        atom = self._atoms.get(atom_id)
        if atom is None:
            raise IntegrityError(atom_id, line, line_number)
        return atom

    def __contains__(self, atom_id: object) -> bool:
        return atom_id in self._atoms

    def __len__(self) -> int:
        return len(self._atoms)

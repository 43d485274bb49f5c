"""
Core molecular data types.

This module defines the data structures a decoded record is materialized
into: Atom, Bond and Molecule. Atoms and bonds are created as empty
placeholders and filled in field by field, because the ASN notation
supplies each field of every atom (or bond) in its own block.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterator

from .elements import Element, get_atomic_number


@dataclass(slots=True, eq=False)
class Atom:
    """Represents an atom in a molecule.

    Atoms compare by identity: two placeholders with equal fields are still
    different atoms.

    Attributes:
        idx: Position of this atom in the molecule.
        atom_id: Identifier assigned by the source record (``aid``), if any.
        symbol: Element symbol, if any.
    """

    idx: int
    atom_id: str | None = None
    symbol: str | None = None

    @property
    def element(self) -> Element | None:
        """Get the periodic table entry for this atom's symbol."""
        if self.symbol is None:
            return None
        return Element.from_symbol(self.symbol)

    @property
    def atomic_number(self) -> int:
        """Get the atomic number for this element, 0 if unknown."""
        return get_atomic_number(self.symbol)

    def to_dict(self) -> dict[str, Any]:
        return {"idx": self.idx, "id": self.atom_id, "symbol": self.symbol}


@dataclass(slots=True, eq=False)
class Bond:
    """Represents a chemical bond between two atoms.

    The two endpoints live in slots 0 and 1 and are set independently.
    A bond references atoms of its own molecule; it never owns them.

    Attributes:
        idx: Position of this bond in the molecule.
        atoms: The two endpoint slots, ``None`` until assigned.
    """

    idx: int
    atoms: list[Atom | None] = field(default_factory=lambda: [None, None])

    def set_atom(self, atom: Atom, slot: int) -> None:
        """Assign an endpoint.

        Args:
            atom: Atom to place at the endpoint.
            slot: Endpoint slot, 0 or 1.

        Raises:
            IndexError: If slot is not 0 or 1.
        """
        if slot not in (0, 1):
            raise IndexError(f"Bond endpoint slot must be 0 or 1, got {slot}")
        self.atoms[slot] = atom

    @property
    def atom1(self) -> Atom | None:
        return self.atoms[0]

    @property
    def atom2(self) -> Atom | None:
        return self.atoms[1]

    @property
    def is_complete(self) -> bool:
        """Whether both endpoints are assigned."""
        return self.atoms[0] is not None and self.atoms[1] is not None

    def other_atom(self, atom: Atom) -> Atom | None:
        """Get the atom on the other end of this bond.

        Args:
            atom: One endpoint of the bond.

        Returns:
            The other endpoint (``None`` if that slot is unassigned).

        Raises:
            ValueError: If atom is not part of this bond.
        """
        if atom is self.atoms[0]:
            return self.atoms[1]
        if atom is self.atoms[1]:
            return self.atoms[0]
        raise ValueError(f"Atom {atom.idx} not in bond {self.idx}")

    def __contains__(self, atom: object) -> bool:
        """Check if atom is an endpoint of this bond."""
        return atom is self.atoms[0] or atom is self.atoms[1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "idx": self.idx,
            "atoms": [None if a is None else a.idx for a in self.atoms],
        }


@dataclass
class Molecule:
    """Represents a molecular structure.

    Attributes:
        atoms: List of atoms in the molecule.
        bonds: List of bonds in the molecule.
        name: Optional molecule name/identifier.

    Example:
        >>> mol = Molecule()
        >>> mol.add_atom(Atom(0, atom_id="1", symbol="C"))
        >>> len(mol)
        1
    """

    atoms: list[Atom] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)
    name: str | None = None

    def __len__(self) -> int:
        """Return number of atoms."""
        return len(self.atoms)

    def __iter__(self) -> Iterator[Atom]:
        """Iterate over atoms."""
        return iter(self.atoms)

    def __getitem__(self, idx: int) -> Atom:
        """Get atom by index."""
        return self.atoms[idx]

    def __contains__(self, atom: object) -> bool:
        return any(a is atom for a in self.atoms)

    def add_atom(self, atom: Atom) -> None:
        self.atoms.append(atom)

    def add_bond(self, bond: Bond) -> None:
        self.bonds.append(bond)

    @property
    def num_atoms(self) -> int:
        """Number of atoms in the molecule."""
        return len(self.atoms)

    @property
    def num_bonds(self) -> int:
        """Number of bonds in the molecule."""
        return len(self.bonds)

    def get_atom_by_id(self, atom_id: str) -> Atom | None:
        """Find the atom carrying a source identifier.

        If the identifier occurs more than once, the last atom wins, matching
        the way bond endpoints are resolved.
        """
        found = None
        for atom in self.atoms:
            if atom.atom_id == atom_id:
                found = atom
        return found

    def get_bond_between(self, atom1: Atom, atom2: Atom) -> Bond | None:
        """Find the bond between two atoms.

        Returns:
            Bond object if found, None otherwise.
        """
        for bond in self.bonds:
            if atom1 in bond and atom2 in bond:
                return bond
        return None

    def neighbors(self, atom: Atom) -> Iterator[Atom]:
        """Iterate over atoms bonded to atom.

        Bonds with an unassigned opposite endpoint are skipped.
        """
        for bond in self.bonds:
            if atom in bond:
                other = bond.other_atom(atom)
                if other is not None:
                    yield other

    def element_counts(self) -> Counter[str]:
        """Count atoms per element symbol; atoms without a symbol are not counted."""
        return Counter(atom.symbol for atom in self.atoms if atom.symbol)

    @property
    def formula(self) -> str:
        """Molecular formula in Hill order.

        Carbon first, hydrogen second, then the rest alphabetically. Without
        carbon every symbol is alphabetical, hydrogen included.
        """
        counts = self.element_counts()
        if "C" in counts:
            order = ["C"] + (["H"] if "H" in counts else [])
            order += sorted(s for s in counts if s not in ("C", "H"))
        else:
            order = sorted(counts)

        parts = []
        for symbol in order:
            n = counts[symbol]
            parts.append(symbol if n == 1 else f"{symbol}{n}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "name": self.name,
            "formula": self.formula,
            "atoms": [atom.to_dict() for atom in self.atoms],
            "bonds": [bond.to_dict() for bond in self.bonds],
        }

"""
Result containers.

A decode pass hands its molecule back wrapped the way chemistry file
readers conventionally do: a file holds sequences, a sequence holds models,
a model holds one molecule set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .types import Molecule


@dataclass
class MoleculeSet:
    """Ordered collection of molecules."""

    molecules: list[Molecule] = field(default_factory=list)

    def add_molecule(self, molecule: Molecule) -> None:
        self.molecules.append(molecule)

    def __len__(self) -> int:
        return len(self.molecules)

    def __iter__(self) -> Iterator[Molecule]:
        return iter(self.molecules)


@dataclass
class ChemModel:
    """A single chemical model, holding at most one molecule set."""

    molecule_set: MoleculeSet | None = None


@dataclass
class ChemSequence:
    """Ordered collection of chemical models."""

    models: list[ChemModel] = field(default_factory=list)

    def add_model(self, model: ChemModel) -> None:
        self.models.append(model)


@dataclass
class ChemFile:
    """Top-level result of reading a file."""

    sequences: list[ChemSequence] = field(default_factory=list)

    def add_sequence(self, sequence: ChemSequence) -> None:
        self.sequences.append(sequence)

    def molecules(self) -> Iterator[Molecule]:
        """Iterate over every molecule in every model of every sequence."""
        for sequence in self.sequences:
            for model in sequence.models:
                if model.molecule_set is not None:
                    yield from model.molecule_set

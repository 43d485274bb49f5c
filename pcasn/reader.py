"""
PubChem Compound ASN reader.

This module decodes the text form of a PubChem ``PC-Compound`` record into
a Molecule. Only four leaf blocks carry data for the decoder:

    - ``atoms.aid``      atom identifiers
    - ``atoms.element``  element symbols
    - ``bonds.aid1``     first endpoint of each bond, as an atom identifier
    - ``bonds.aid2``     second endpoint of each bond, as an atom identifier

Every other block is skipped by brace counting. The input is consumed
strictly forward, one line at a time; no tree is ever built. A block is
recognized by its command keyword, the text in front of its ``{``:

    PC-Compound ::= {
      atoms {
        aid {
          1,
          2
        },
        element {
          c,
          o
        }
      },
      bonds {
        aid1 {
          1
        },
        aid2 {
          2
        }
      }
    }

Bond endpoints are looked up by identifier, so ``atoms.aid`` must come
before the bond blocks that refer to it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from os import PathLike
from typing import Final, Iterable, TextIO, Union

from pcasn.arena import AtomRegistry, EntityArena
from pcasn.containers import ChemFile, ChemModel, ChemSequence, MoleculeSet
from pcasn.cursor import LineCursor
from pcasn.exceptions import ReaderError, StreamError
from pcasn.options import DEFAULT_OPTIONS, ReaderOptions
from pcasn.tokens import (
    CLOSE_BRACE,
    OPEN_BRACE,
    closes_block,
    extract_command,
    extract_value,
    normalize_symbol,
    opens_block,
)
from pcasn.types import Atom, Bond, Molecule

logger = logging.getLogger(__name__)

Source = Union[str, TextIO, Iterable[str]]

RECORD_HEADER: Final[str] = "PC-Compound ::="


@dataclass(frozen=True, slots=True)
class ResourceFormat:
    """Description of a chemical file format.

    Attributes:
        name: Human-readable format name.
        extensions: File name extensions, without the dot.
        mime_type: MIME type of the format.
    """

    name: str
    extensions: tuple[str, ...]
    mime_type: str


PUBCHEM_ASN_FORMAT: Final[ResourceFormat] = ResourceFormat(
    name="PubChem Compound ASN",
    extensions=("asn",),
    mime_type="chemical/x-ncbi-asn1",
)


@dataclass
class _DecodeContext:
    """State of one decode pass.

    Created fresh for every pass and threaded through the handlers, so no
    two passes ever share a molecule, an arena or a registry.
    """

    cursor: LineCursor
    options: ReaderOptions
    molecule: Molecule = field(default_factory=Molecule)
    registry: AtomRegistry = field(default_factory=AtomRegistry)
    atoms: EntityArena[Atom] = field(init=False)
    bonds: EntityArena[Bond] = field(init=False)
    records: int = 0

    def __post_init__(self) -> None:
        self.atoms = EntityArena(self.molecule.atoms, lambda i: Atom(i))
        self.bonds = EntityArena(self.molecule.bonds, lambda i: Bond(i))


# ----------------------------------------------------------------------------
# Block handlers
# ----------------------------------------------------------------------------

def _skip_block(ctx: _DecodeContext) -> None:
    """Consume lines up to the close of an unrecognized block.

    Called right after the block's opening line. By default each line is
    counted at most once as opening and at most once as closing, so a line
    holding two ``}`` only closes one level; ``strict_braces`` counts every
    brace instead. Running out of input ends the skip silently.
    """
    depth = 0
    for line in ctx.cursor:
        if ctx.options.strict_braces:
            for char in line:
                if char == OPEN_BRACE:
                    depth += 1
                elif char == CLOSE_BRACE:
                    if depth == 0:
                        return
                    depth -= 1
            continue

        if opens_block(line):
            depth += 1
        if closes_block(line):
            if depth == 0:
                return
            depth -= 1


def _process_block(ctx: _DecodeContext, line: str) -> None:
    """Dispatch a top-level block-opening line."""
    command = extract_command(line)
    if command == "atoms":
        logger.debug("ASN atoms found")
        _process_atom_block(ctx)
    elif command == "bonds":
        logger.debug("ASN bonds found")
        _process_bond_block(ctx)
    elif command == RECORD_HEADER:
        ctx.records += 1
        if ctx.records > 1:
            logger.warning(
                "Record %d at line %d is merged into the same molecule",
                ctx.records, ctx.cursor.line_number,
            )
        else:
            logger.debug("ASN PC-Compound found")
    else:
        logger.debug("Skipping block: %s", command)
        _skip_block(ctx)


def _process_atom_block(ctx: _DecodeContext) -> None:
    for line in ctx.cursor:
        if opens_block(line):
            _process_atom_sub_block(ctx, line)
        elif closes_block(line):
            return
        else:
            logger.debug("Skipping non-block: %s", line)


def _process_bond_block(ctx: _DecodeContext) -> None:
    for line in ctx.cursor:
        if opens_block(line):
            _process_bond_sub_block(ctx, line)
        elif closes_block(line):
            return
        else:
            logger.debug("Skipping non-block: %s", line)


def _process_atom_sub_block(ctx: _DecodeContext, line: str) -> None:
    command = extract_command(line)
    if command == "aid":
        logger.debug("ASN atoms aid found")
        _assign_atom_ids(ctx)
    elif command == "element":
        logger.debug("ASN atoms element found")
        _assign_atom_symbols(ctx)
    else:
        logger.debug("Skipping atoms block: %s", command)
        _skip_block(ctx)


def _process_bond_sub_block(ctx: _DecodeContext, line: str) -> None:
    command = extract_command(line)
    if command == "aid1":
        logger.debug("ASN bonds aid1 found")
        _resolve_bond_endpoints(ctx, 0)
    elif command == "aid2":
        logger.debug("ASN bonds aid2 found")
        _resolve_bond_endpoints(ctx, 1)
    else:
        logger.debug("Skipping bonds block: %s", command)
        _skip_block(ctx)


def _assign_atom_ids(ctx: _DecodeContext) -> None:
    """Read ``atoms.aid``: the n-th value becomes the id of atom n."""
    index = 0
    for line in ctx.cursor:
        if closes_block(line):
            return
        atom = ctx.atoms.get(index)
        atom_id = extract_value(line)
        atom.atom_id = atom_id
        ctx.registry.register(atom_id, atom)
        index += 1


def _assign_atom_symbols(ctx: _DecodeContext) -> None:
    """Read ``atoms.element``: the n-th value becomes the symbol of atom n."""
    index = 0
    for line in ctx.cursor:
        if closes_block(line):
            return
        atom = ctx.atoms.get(index)
        atom.symbol = normalize_symbol(extract_value(line))
        index += 1


def _resolve_bond_endpoints(ctx: _DecodeContext, slot: int) -> None:
    """Read ``bonds.aid1`` (slot 0) or ``bonds.aid2`` (slot 1).

    Raises:
        IntegrityError: If a value names an atom id not seen in ``atoms.aid``.
    """
    index = 0
    for line in ctx.cursor:
        if closes_block(line):
            return
        bond = ctx.bonds.get(index)
        atom = ctx.registry.resolve(extract_value(line), line, ctx.cursor.line_number)
        bond.set_atom(atom, slot)
        index += 1


# ----------------------------------------------------------------------------
# Record driver
# ----------------------------------------------------------------------------

def _decode(cursor: LineCursor, options: ReaderOptions) -> Molecule:
    """Run one decode pass over cursor and return the molecule."""
    ctx = _DecodeContext(cursor, options)

    for line in cursor:
        if opens_block(line):
            _process_block(ctx, line)
        else:
            logger.debug("Skipping non-block: %s", line)

    molecule = ctx.molecule
    unnamed = sum(1 for atom in molecule.atoms if atom.symbol is None)
    if unnamed:
        logger.warning("%d of %d atoms have no element symbol", unnamed, molecule.num_atoms)
    partial = sum(1 for bond in molecule.bonds if not bond.is_complete)
    if partial:
        logger.warning("%d of %d bonds have an unassigned endpoint", partial, molecule.num_bonds)

    logger.info(
        "Decoded %d atoms and %d bonds from %d lines",
        molecule.num_atoms, molecule.num_bonds, cursor.line_number,
    )
    return molecule


def _wrap(molecule: Molecule, chem_file: ChemFile) -> ChemFile:
    molecule_set = MoleculeSet()
    molecule_set.add_molecule(molecule)
    sequence = ChemSequence()
    sequence.add_model(ChemModel(molecule_set=molecule_set))
    chem_file.add_sequence(sequence)
    return chem_file


class PCCompoundASNReader:
    """Reader for PubChem Compound ASN text.

    The reader holds only its input and options; every call to
    :meth:`read` decodes with fresh state.

    Example:
        >>> text = "atoms {\\n aid {\\n 1\\n }\\n element {\\n c\\n }\\n}"
        >>> chem_file = PCCompoundASNReader(text.splitlines()).read()
        >>> [a.symbol for a in next(chem_file.molecules())]
        ['C']
    """

    def __init__(
        self,
        source: Source | None = None,
        options: ReaderOptions | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            source: Text stream, iterable of lines or a whole document as a
                single string; None reads nothing.
            options: Reading options (defaults to ``ReaderOptions()``).
        """
        self.options = options if options is not None else DEFAULT_OPTIONS
        self._source: Source = source if source is not None else ()

    @property
    def format(self) -> ResourceFormat:
        return PUBCHEM_ASN_FORMAT

    def set_source(self, source: Source) -> None:
        self._source = source

    def accepts(self, cls: type) -> bool:
        """Check whether read() can fill objects of the given class."""
        return isinstance(cls, type) and issubclass(cls, ChemFile)

    def read(self, container: ChemFile | None = None) -> ChemFile:
        """Decode the input into a ChemFile.

        Args:
            container: ChemFile to add the result to; a new one if omitted.

        Returns:
            The container, holding one sequence with one model whose
            molecule set holds the decoded molecule.

        Raises:
            ReaderError: If container is not a ChemFile.
            StreamError: If the input cannot be read.
            IntegrityError: If a bond refers to an undeclared atom id.
        """
        if container is None:
            container = ChemFile()
        elif not isinstance(container, ChemFile):
            raise ReaderError("Only supported is reading of ChemFile objects.")

        cursor = LineCursor(self._source, reflow=self.options.reflow)
        return _wrap(_decode(cursor, self.options), container)

    def close(self) -> None:
        """Close the underlying stream, if it can be closed."""
        close = getattr(self._source, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "PCCompoundASNReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def parse(text: str, options: ReaderOptions | None = None) -> ChemFile:
    """Parse ASN text into a ChemFile.

    This is a convenience function that creates a PCCompoundASNReader and
    calls read().

    Example:
        >>> chem_file = parse("atoms {\\n aid { 1 },\\n element { o }\\n}")
        >>> next(chem_file.molecules()).formula
        'O'
    """
    return PCCompoundASNReader(text.splitlines(), options).read()


def parse_molecule(text: str, options: ReaderOptions | None = None) -> Molecule:
    """Parse ASN text and return its single molecule."""
    return next(parse(text, options).molecules())


def read_file(
    path: str | PathLike[str],
    options: ReaderOptions | None = None,
) -> ChemFile:
    """Read an ASN file into a ChemFile.

    Raises:
        StreamError: If the file cannot be opened or read.
    """
    options = options if options is not None else DEFAULT_OPTIONS
    try:
        handle = open(path, encoding=options.encoding)
    except OSError as exc:
        raise StreamError(f"Cannot open {path}: {exc.strerror or exc}") from exc

    with PCCompoundASNReader(handle, options) as reader:
        return reader.read()

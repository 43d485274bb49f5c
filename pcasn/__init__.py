"""
pcasn - Pure Python reader for PubChem Compound ASN text.

A zero-dependency library that decodes the atoms and bonds of a
``PC-Compound`` record into a molecular graph.

    >>> from pcasn import parse_molecule
    >>> mol = parse_molecule('''
    ... PC-Compound ::= {
    ...   atoms { aid { 1, 2 }, element { c, o } },
    ...   bonds { aid1 { 1 }, aid2 { 2 } }
    ... }''')
    >>> mol.formula
    'CO'

Modules:
    pcasn.reader   - Record driver, block handlers and reader class
    pcasn.tokens   - Command and value extraction from single lines
    pcasn.cursor   - Forward-only line source
    pcasn.arena    - Positional entity store and atom-id registry
"""

__version__ = "0.1.0"

# Core types
from pcasn.types import Atom, Bond, Molecule
from pcasn.containers import ChemFile, ChemModel, ChemSequence, MoleculeSet

# Reading
from pcasn.reader import (
    PUBCHEM_ASN_FORMAT,
    PCCompoundASNReader,
    ResourceFormat,
    parse,
    parse_molecule,
    read_file,
)
from pcasn.options import ReaderOptions
from pcasn.cursor import LineCursor

# Exceptions
from pcasn.exceptions import (
    ChemError,
    IntegrityError,
    ParseError,
    ReaderError,
    StreamError,
)

# Element data
from pcasn.elements import Element

__all__ = [
    # Types
    "Atom", "Bond", "Molecule",
    "ChemFile", "ChemModel", "ChemSequence", "MoleculeSet",
    # Reading
    "PCCompoundASNReader", "parse", "parse_molecule", "read_file",
    "ReaderOptions", "LineCursor", "ResourceFormat", "PUBCHEM_ASN_FORMAT",
    # Exceptions
    "ChemError", "ParseError", "IntegrityError", "ReaderError", "StreamError",
    # Elements
    "Element",
]

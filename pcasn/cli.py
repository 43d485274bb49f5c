"""
Command-line front end.

    pcasn [-v | -q] [--raw-lines] [--strict-braces] [--json] FILE...

Reads each PubChem Compound ASN file (``-`` for standard input) and prints
one summary line per file, or a JSON document with every molecule.
"""

from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from typing import Sequence

from pcasn import __version__
from pcasn.exceptions import ChemError
from pcasn.options import DEFAULT_OPTIONS, ReaderOptions
from pcasn.reader import PCCompoundASNReader, read_file
from pcasn.types import Molecule


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pcasn",
        description="Decode atoms and bonds from PubChem Compound ASN text files.",
    )
    parser.add_argument("files", nargs="+", metavar="FILE",
                        help="ASN file to read, '-' for standard input")
    parser.add_argument("--json", action="store_true",
                        help="print molecules as JSON instead of summary lines")
    parser.add_argument("--raw-lines", action="store_true",
                        help="use physical lines as they are (no splitting at braces and commas)")
    parser.add_argument("--strict-braces", action="store_true",
                        help="count every brace when skipping unknown blocks")
    parser.add_argument("--encoding", default="utf-8",
                        help="text encoding of the input files (default: %(default)s)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0,
                           help="log progress (-vv for every block)")
    verbosity.add_argument("-q", "--quiet", action="store_true",
                           help="only log errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.quiet:
        return logging.ERROR
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    return logging.WARNING


def _read(path: str, options: ReaderOptions) -> Molecule:
    if path == "-":
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding=options.encoding)
        try:
            chem_file = PCCompoundASNReader(stream, options).read()
        finally:
            stream.detach()
    else:
        chem_file = read_file(path, options)
    return next(chem_file.molecules())


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=_log_level(args),
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = DEFAULT_OPTIONS.replace(
        reflow=not args.raw_lines,
        strict_braces=args.strict_braces,
        encoding=args.encoding,
    )

    status = 0
    documents = []
    for path in args.files:
        try:
            molecule = _read(path, options)
        except ChemError as exc:
            print(f"error: {path}: {exc}", file=sys.stderr)
            status = 1
            continue

        if molecule.name is None and path != "-":
            molecule.name = path
        if args.json:
            documents.append(molecule.to_dict())
        else:
            print(f"{path}: {molecule.num_atoms} atoms, {molecule.num_bonds} bonds, "
                  f"{molecule.formula or '-'}")

    if args.json:
        print(json.dumps(documents, indent=2))
    return status


if __name__ == "__main__":
    sys.exit(main())

"""Test configuration and fixtures for pcasn tests."""

import pytest


# Ethanol, PubChem CID 702, in the layout PubChem writes: one value per line.
ETHANOL_ASN = """\
PC-Compound ::= {
  id id cid 702,
  atoms {
    aid {
      1,
      2,
      3,
      4,
      5,
      6,
      7,
      8,
      9
    },
    element {
      o,
      c,
      c,
      h,
      h,
      h,
      h,
      h,
      h
    }
  },
  bonds {
    aid1 {
      1,
      1,
      2,
      2,
      2,
      2,
      3,
      3
    },
    aid2 {
      3,
      9,
      3,
      4,
      5,
      6,
      7,
      8
    },
    order {
      single,
      single,
      single,
      single,
      single,
      single,
      single,
      single
    }
  },
  coords {
    {
      type {
        two-d,
        computed,
        units-bohr
      },
      aid {
        1,
        2,
        3,
        4,
        5,
        6,
        7,
        8,
        9
      },
      conformers {
        {
          x {
            3.7321,
            2.866,
            2.0,
            2.3291,
            3.403,
            2.31,
            1.6900,
            2.31,
            4.269
          },
          y {
            0.25,
            -0.25,
            0.25,
            -0.7869,
            -0.7869,
            0.2869,
            0.8869,
            0.8869,
            -0.06
          },
          style {
            annotation {
            },
            aid1 {
            },
            aid2 {
            }
          }
        }
      }
    }
  },
  props {
    {
      urn {
        label "IUPAC Name",
        name "Preferred",
        datatype string,
        version "2.7.0",
        software "Lexichem TK",
        source "openeye.com",
        release "2021.10.14"
      },
      value sval "ethanol"
    },
    {
      urn {
        label "InChI",
        name "Standard",
        datatype string,
        version "1.0.6",
        software "InChI",
        source "iupac.org",
        release "2021.10.14"
      },
      value sval "InChI=1S/C2H6O/c1-2-3/h3H,2H2,1H3"
    }
  },
  count {
    heavy-atom 3,
    atom-chiral 0,
    atom-chiral-def 0,
    atom-chiral-undef 0,
    bond-chiral 0,
    bond-chiral-def 0,
    bond-chiral-undef 0,
    isotope-atom 0,
    covalent-unit 1,
    tautomers -1
  }
}
"""


# Acetate, PubChem CID 175, with a charge block inside atoms.
ACETATE_ASN = """\
PC-Compound ::= {
  id id cid 175,
  atoms {
    aid {
      1,
      2,
      3,
      4,
      5,
      6,
      7
    },
    element {
      o,
      o,
      c,
      c,
      h,
      h,
      h
    },
    charge {
      {
        aid 2,
        value -1
      }
    }
  },
  bonds {
    aid1 {
      1,
      2,
      3,
      3,
      3,
      3
    },
    aid2 {
      4,
      4,
      4,
      5,
      6,
      7
    },
    order {
      double,
      single,
      single,
      single,
      single,
      single
    }
  },
  charge -1
}
"""


# The compact form: several blocks per line.
COMPACT_ASN = """\
PC-Compound ::= {
  atoms { aid { 1, 2 }, element { c, o } },
  bonds { aid1 { 1 }, aid2 { 2 } }
}
"""


@pytest.fixture
def ethanol_asn() -> str:
    """PubChem record for ethanol (9 atoms, 8 bonds)."""
    return ETHANOL_ASN


@pytest.fixture
def acetate_asn() -> str:
    """PubChem record for the acetate anion (7 atoms, 6 bonds)."""
    return ACETATE_ASN


@pytest.fixture
def compact_asn() -> str:
    """Two-atom record written with blocks on a single line."""
    return COMPACT_ASN


@pytest.fixture
def asn_file(tmp_path, ethanol_asn):
    """Ethanol record written to a temporary .asn file."""
    path = tmp_path / "702.asn"
    path.write_text(ethanol_asn, encoding="utf-8")
    return path

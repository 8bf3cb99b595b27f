"""Sample file contents shared by the tests."""

WATER_XYZ = "2\nwater\nO 0.0 0.0 0.0\nH 0.0 0.0 0.96\n"

TRAJECTORY_XYZ = """3
step 1
O   0.000000   0.000000   0.117300
H   0.000000   0.757200  -0.469200
H   0.000000  -0.757200  -0.469200
3
step 2
8   0.000000   0.000000   0.120000
1   0.000000   0.760000  -0.470000
1   0.000000  -0.760000  -0.470000

this line is never read
"""

CUBE = """ Density cube
 SCF total density
    2    0.000000    0.000000    0.000000
    2    0.200000    0.000000    0.000000
    2    0.000000    0.200000    0.000000
    3    0.000000    0.000000    0.200000
    6    6.000000    1.000000    0.000000    0.000000
    1    1.000000    0.000000    0.000000    2.000000
  1.0E+00  2.0E+00  3.0E+00  4.0E+00  5.0E+00  6.0E+00
  7.0E+00  8.0E+00  9.0E+00  1.0E+01  1.1E+01  1.2E+01
"""

CUBE_WITH_DSET_IDS = """ Orbital cube
 MO 5
   -1    0.000000    0.000000    0.000000
    1    0.200000    0.000000    0.000000
    1    0.000000    0.200000    0.000000
    2    0.000000    0.000000    0.200000
    8    8.000000    0.000000    0.000000    0.000000
    1    5
  -0.5  0.5
"""

CFOUR_SIGNATURE = "<<<     CCCCCC     CCCCCC   |||     CCCCCC     CCCCCC   >>>"

CFOUR_LOG = f"""
   {CFOUR_SIGNATURE}
          CFOUR Coupled-Cluster techniques for Computational Chemistry

 ----------------------------------------------------------------
         Coordinates used in calculation (QCOMP)
 ----------------------------------------------------------------
 Z-matrix   Atomic            Coordinates (in bohr)
  Symbol    Number           X              Y              Z
 ----------------------------------------------------------------
     O         8         0.00000000     0.00000000    -0.12000000
     H         1         0.00000000    -1.40000000     1.00000000
     X         0         0.00000000     0.00000000     1.00000000
 ----------------------------------------------------------------

 Geometry optimization step 2
 Z-matrix   Atomic            Coordinates (in bohr)
  Symbol    Number           X              Y              Z
 ----------------------------------------------------------------
     O         8         0.00000000     0.00000000    -0.13000000
     H         1         0.00000000    -1.41000000     1.01000000
 ----------------------------------------------------------------
"""

WATER_MOL = """water
  RDKit          3D

  3  2  0  0  0  0  0  0  0  0999 V2000
    0.0000    0.0000    0.1173 O   0  0  0  0  0  0  0  0  0  0  0  0
    0.0000    0.7572   -0.4692 H   0  0  0  0  0  0  0  0  0  0  0  0
    0.0000   -0.7572   -0.4692 H   0  0  0  0  0  0  0  0  0  0  0  0
  1  2  1  0
  1  3  1  0
M  END
"""

# Passes the XYZ recognizer (count 1 and one valid card) but is a molfile.
XYZ_LOOKALIKE_MOL = """1

C 0.0 0.0 0.0
  1  0  0  0  0  0  0  0  0  0999 V2000
    0.0000    0.0000    0.0000 C   0  0  0  0  0  0  0  0  0  0  0  0
M  END
"""

UNEX1_LOG = """UNEX 1.12-3-abc
 Refinement started

 water > Cartesian coordinates of all atoms (Angstroms) in the molecule
 ==========================================================
   N  Atom   Z    Mass          X           Y           Z
 ==========================================================
   1  O      8   15.995    0.000000    0.000000    0.117300
   2  H      1    1.008    0.000000    0.757200   -0.469200
   garbage row that is not a table row
   3  H      1    1.008    0.000000   bad        -0.469200
 ----------------------------------------------------------

 ammonia > Cartesian coordinates of all atoms (Angstroms) in the molecule
 ==========================================================
   N  Atom   Z    Mass          X           Y           Z
 ==========================================================
   1  N      7   14.003    0.000000    0.000000    0.000000
 ----------------------------------------------------------

 water > Cartesian coordinates of all atoms (Angstroms) in the molecule
 ==========================================================
   N  Atom   Z    Mass          X           Y           Z
 ==========================================================
   1  O      8   15.995    0.000000    0.000000    0.120000
 ----------------------------------------------------------
"""

UNEX2_LOG = """UNEX 2.0-0-x
 Refinement started

 Cartesian coordinates (Angstroms) of atoms in water
 Format: UNEX
 ----------------------------------------------------------
   N  Atom   Z    Mass          X           Y           Z
 ----------------------------------------------------------
   1  O      8   15.995    0.000000    0.000000    0.117300
   2  H      1    1.008    0.000000    0.757200   -0.469200
   not a row
 ----------------------------------------------------------

 Cartesian coordinates (Angstroms) of atoms in ammonia
 Format: MOL
 ----------------------------------------------------------
 ammonia
 generated by UNEX
   N    0.000000    0.000000    0.000000
   X    1.000000    0.000000    0.000000
   H    0.000000    0.940000    0.380000
 ----------------------------------------------------------

 Cartesian coordinates (Angstroms) of atoms in water
 Format: UNEX
 ----------------------------------------------------------
   N  Atom   Z    Mass          X           Y           Z
 ----------------------------------------------------------
   1  O      8   15.995    0.000000    0.000000    0.120000
 ----------------------------------------------------------
"""


def unex2_mol_block(rows, version="2.1-4-r7"):
    """A 2.x file holding one MOL-format table with the given rows."""
    body = "\n".join(rows)
    return f"""UNEX {version}
 Cartesian coordinates (Angstroms) of atoms in mol1
 Format: MOL
 ----------------------------------------------------------
 mol1
 generated by UNEX
{body}
 ----------------------------------------------------------
"""

"""
Cfour log file recognizer and parser.

Every "Coordinates (in bohr)" table in the log becomes one coordinate set.
"""

import logging

from ..errors import ParseError
from ..models import DUMMY_ATOM, MOLECULE, AtomicCoordinates, Molecule, Node, coordinates_node
from .common import BOHR_TO_ANGSTROM, parse_floats, parse_int, read_head, split_lines

logger = logging.getLogger(__name__)

MAX_VALIDATION_LINES = 20

CFOUR_SIGNATURE = "<<<     CCCCCC     CCCCCC   |||     CCCCCC     CCCCCC   >>>"
COORDINATES_MARKER = "Z-matrix   Atomic            Coordinates (in bohr)"
TABLE_HEADER_LINES = 2


def test(file_path):
    """Look for the Cfour banner anywhere in lines 2..20."""
    lines = read_head(file_path, MAX_VALIDATION_LINES)
    return any(CFOUR_SIGNATURE in line for line in lines[1:])


def _read_table(lines, start):
    """
    Read table rows from ``lines[start]`` up to a ``--`` line.

    Returns:
        tuple: (AtomicCoordinates, index of the first line after the table)
    """
    atomic_num, xs, ys, zs = [], [], [], []
    i = start
    while i < len(lines):
        line = lines[i]
        line_number = i + 1
        i += 1
        if "--" in line:
            break

        items = line.split()
        if not items:
            continue
        if len(items) < 5:
            raise ParseError(f"Invalid coordinate row at line {line_number}, expected 5 values.", line_number)

        try:
            num = parse_int(items[1])
        except ValueError:
            raise ParseError(f"Invalid atomic number at line {line_number}.", line_number) from None
        x, y, z = parse_floats(items[2:5], "coordinate value(s)", line_number)

        atomic_num.append(DUMMY_ATOM if num == 0 else num)
        xs.append(x * BOHR_TO_ANGSTROM)
        ys.append(y * BOHR_TO_ANGSTROM)
        zs.append(z * BOHR_TO_ANGSTROM)

    return AtomicCoordinates(atomic_num=atomic_num, x=xs, y=ys, z=zs), i


def parse(content, file_name):
    """
    Parse a Cfour log.

    Returns:
        Node: A molecule node with children "Set#1", "Set#2", ... in file order.
    """
    lines = split_lines(content)
    children = []
    last_coords = None

    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1
        if COORDINATES_MARKER not in line:
            continue

        coords, i = _read_table(lines, i + TABLE_HEADER_LINES)
        children.append(coordinates_node(f"Set#{len(children) + 1}", coords))
        last_coords = coords

    if last_coords is not None:
        molecule = Molecule(n_atoms=last_coords.n_atoms, atomic_num=list(last_coords.atomic_num), name=file_name)
    else:
        molecule = Molecule(name=file_name)

    logger.debug(f"Parsed {len(children)} coordinate set(s) from Cfour log {file_name}")
    return Node(name=file_name, type=MOLECULE, data=molecule.to_bytes(), children=tuple(children))

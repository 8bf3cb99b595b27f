"""
MDL Molfile (V2000) recognizer and parser.

Only the header, counts line and atom block are read; the bond block and
property lines are not parsed.
"""

import logging
from enum import Enum

from ..errors import ParseError
from ..models import MOLECULE, AtomicCoordinates, Molecule, Node, coordinates_node
from .common import parse_count, parse_floats, parse_int, read_head, resolve_element, split_lines

logger = logging.getLogger(__name__)

MAX_VALIDATION_LINES = 4
HEADER_LINES = 3


class ParserState(Enum):
    INIT = "init"
    CONTROL = "control"
    ATOM = "atom"


def test(file_path):
    """Check that the counts line (line 4) declares V2000."""
    lines = read_head(file_path, MAX_VALIDATION_LINES)
    if len(lines) < 4:
        return False
    return " V2000" in lines[3]


def _parse_counts_line(line, line_number):
    items = line.split()
    try:
        num_atoms = parse_count(items[0])
    except (IndexError, ValueError):
        raise ParseError(
            f"Invalid control line {line_number}, expected number of atoms.", line_number
        ) from None
    try:
        num_bonds = parse_int(items[1])
    except (IndexError, ValueError):
        raise ParseError(
            f"Invalid control line {line_number}, expected number of bonds.", line_number
        ) from None

    if num_atoms == 0:
        raise ParseError(f"Invalid number of atoms {num_atoms} defined in line {line_number}.", line_number)
    if num_bonds < 0:
        raise ParseError(f"Invalid number of bonds {num_bonds} defined in line {line_number}.", line_number)
    return num_atoms, num_bonds


def parse(content, file_name):
    """
    Parse a V2000 molfile.

    Returns:
        Node: A molecule node with one atomic_coordinates child named after
        the molecule title, or after the file if the title is blank.
    """
    state = ParserState.INIT
    title = ""
    num_atoms = 0
    atomic_num, xs, ys, zs = [], [], [], []
    line_number = 0

    for line_number, line in enumerate(split_lines(content), start=1):
        if state is ParserState.INIT:
            if not title:
                title = line.strip()
            if line_number == HEADER_LINES:
                state = ParserState.CONTROL

        elif state is ParserState.CONTROL:
            num_atoms, num_bonds = _parse_counts_line(line, line_number)
            logger.debug(f"Molfile {file_name}: {num_atoms} atoms, {num_bonds} bonds")
            state = ParserState.ATOM

        elif state is ParserState.ATOM:
            items = line.split()
            if len(items) < 4:
                raise ParseError(f"Invalid atom coordinate value(s) at line {line_number}.", line_number)
            num = resolve_element(items[3], line_number)
            x, y, z = parse_floats(items[0:3], "atom coordinate value(s)", line_number)
            atomic_num.append(num)
            xs.append(x)
            ys.append(y)
            zs.append(z)

            if len(atomic_num) == num_atoms:
                break
    else:
        expected = "counts line" if state is not ParserState.ATOM else (
            f"{num_atoms} atom lines, found {len(atomic_num)}"
        )
        raise ParseError(
            f"Unexpected end of file at line {line_number + 1}, expected {expected}.", line_number + 1
        )

    coords = AtomicCoordinates(atomic_num=atomic_num, x=xs, y=ys, z=zs)
    molecule = Molecule(n_atoms=num_atoms, atomic_num=list(atomic_num), name=file_name)
    return Node(
        name=file_name,
        type=MOLECULE,
        data=molecule.to_bytes(),
        children=(coordinates_node(title or file_name, coords),),
    )

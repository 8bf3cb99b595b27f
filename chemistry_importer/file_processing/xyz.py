"""
XYZ file recognizer and parser.

Supports multi-geometry (trajectory) files: blocks of
``count / comment / count cards`` repeated until a blank line or end of file.
"""

import logging
import re
from enum import Enum

from ..errors import ParseError
from ..models import MOLECULE, AtomicCoordinates, Molecule, Node, coordinates_node
from .common import parse_count, parse_floats, parse_int, read_head, resolve_element, split_lines

logger = logging.getLogger(__name__)

MAX_VALIDATION_LINES = 10

CARD_RE = re.compile(r'^([A-Z][a-z]?|[0-9]+)([\s]+[-+]?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?){3}$')


class ParserState(Enum):
    INIT = "init"
    COMMENT = "comment"
    CARDS = "cards"


def test(file_path):
    """
    Check whether a file looks like an XYZ file from its first few lines.

    Args:
        file_path (str or Path): Path to the file.

    Returns:
        bool: True if the header and the first atom cards are well formed.
    """
    lines = read_head(file_path, MAX_VALIDATION_LINES)
    if not lines:
        return False

    try:
        num_atoms = parse_count(lines[0].strip())
    except ValueError:
        return False
    if num_atoms == 0:
        return False

    # Line 2 is a free comment; check the cards that fit in the window
    cards_to_check = min(num_atoms, MAX_VALIDATION_LINES - 2)
    for line in lines[2:2 + cards_to_check]:
        if not CARD_RE.match(line.strip()):
            return False

    return True


def _parse_card(line, line_number):
    items = line.split()
    if len(items) < 4:
        raise ParseError(f"Invalid atom card at line {line_number}.", line_number)

    try:
        atomic_num = parse_int(items[0])
    except ValueError:
        atomic_num = resolve_element(items[0], line_number)

    x, y, z = parse_floats(items[1:4], "coordinate value(s)", line_number)
    return atomic_num, x, y, z


def parse(content, file_name):
    """
    Parse XYZ content.

    Args:
        content (str): Full file content.
        file_name (str): Name used for the top-level node.

    Returns:
        Node: A molecule node with one atomic_coordinates child per block.

    Raises:
        ParseError: On any malformed count line or atom card, or if the file
            ends before the first block is complete. A later truncated block
            is dropped with a warning.
    """
    state = ParserState.INIT
    num_atoms = 0
    title = ""
    atomic_num, xs, ys, zs = [], [], [], []
    children = []
    molecule = Molecule(name=file_name)
    line_number = 0

    for line_number, line in enumerate(split_lines(content), start=1):
        if state is ParserState.INIT:
            trimmed = line.strip()
            if not trimmed:
                break
            try:
                num_atoms = parse_count(trimmed)
            except ValueError:
                raise ParseError(
                    f"Invalid line {line_number}, expected number of atoms.", line_number
                ) from None
            if num_atoms == 0:
                raise ParseError(
                    f"Invalid number of atoms {num_atoms} at line {line_number}.", line_number
                )
            state = ParserState.COMMENT

        elif state is ParserState.COMMENT:
            title = line.strip()
            if not title:
                title = f"Set@line={line_number - 1}"
            atomic_num, xs, ys, zs = [], [], [], []
            state = ParserState.CARDS

        elif state is ParserState.CARDS:
            num, x, y, z = _parse_card(line, line_number)
            atomic_num.append(num)
            xs.append(x)
            ys.append(y)
            zs.append(z)

            if len(atomic_num) == num_atoms:
                coords = AtomicCoordinates(atomic_num=atomic_num, x=xs, y=ys, z=zs)
                children.append(coordinates_node(title, coords))
                molecule = Molecule(n_atoms=num_atoms, atomic_num=list(atomic_num), name=file_name)
                state = ParserState.INIT

    if state is not ParserState.INIT:
        expected = "comment line" if state is ParserState.COMMENT else (
            f"{num_atoms} atom cards, found {len(atomic_num)}"
        )
        reason = f"Unexpected end of file at line {line_number + 1}, expected {expected}."
        # A truncated trailing block (e.g. an interrupted trajectory) is dropped
        if not children:
            raise ParseError(reason, line_number + 1)
        logger.warning(f"{file_name}: {reason} Keeping {len(children)} complete block(s).")

    logger.debug(f"Parsed {len(children)} coordinate block(s) from XYZ file {file_name}")
    return Node(name=file_name, type=MOLECULE, data=molecule.to_bytes(), children=tuple(children))

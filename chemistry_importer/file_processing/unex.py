"""
UNEX output recognizer and parser.

The program version in the first line selects between the 1.x and the 2.x
layouts of the Cartesian coordinates tables. Coordinate sets are grouped by
molecule name, in the order the molecules first appear.

Rows of a UNEX-style table that cannot be read are dropped without an error,
while rows of a MOL-style table (2.x only) must be valid. A 2.x table whose
header declares no format still yields a coordinate set, with no atoms.
"""

import logging
import re

from ..errors import ParseError
from ..models import DUMMY_ATOM, MOLECULE, UNEX, AtomicCoordinates, Node, coordinates_node
from .common import parse_floats, parse_int, read_head, resolve_element, split_lines

logger = logging.getLogger(__name__)

MAX_VALIDATION_LINES = 1

VERSION_RE = re.compile(r'^([0-9]+)\.([0-9]+)-([0-9]+)-([a-z0-9]+)$')

UNEX2_MIN_VERSION = 2_000_000

UNEX1_MARKER = "> Cartesian coordinates of all atoms (Angstroms) in"
UNEX1_TABLE_HEADER_LINES = 3

UNEX2_MARKER = "Cartesian coordinates (Angstroms) of atoms in"
UNEX2_MOL_HEADER_LINES = 2

FORMAT_UNEX = "UNEX"
FORMAT_MOL = "MOL"


def get_format_version(line):
    """
    Decode the UNEX version from the first line of a file.

    ``UNEX 1.12-3-abc`` gives ``1_000_000 * 1 + 10_000 * 12 + 3``.

    Returns:
        int or None: The encoded version, or None if the line is not a UNEX banner.
    """
    if not line.strip().startswith("UNEX"):
        return None
    parts = line.split()
    if len(parts) < 2:
        return None
    match = VERSION_RE.match(parts[1])
    if not match:
        return None
    major, minor, patch = (int(g) for g in match.groups()[:3])
    return 1_000_000 * major + 10_000 * minor + patch


def test(file_path):
    lines = read_head(file_path, MAX_VALIDATION_LINES)
    if not lines:
        return False
    return get_format_version(lines[0]) is not None


def _parse_unex_row(items):
    """Return (atomic_num, x, y, z) or None if the row is not a valid UNEX table row."""
    if len(items) < 7:
        return None
    try:
        return parse_int(items[2]), float(items[4]), float(items[5]), float(items[6])
    except ValueError:
        return None


def _parse_mol_row(items, line_number):
    if len(items) < 4:
        raise ParseError(f"Invalid atom row at line {line_number}, expected 4 values.", line_number)
    if items[0] == "X":
        num = DUMMY_ATOM
    else:
        num = resolve_element(items[0], line_number)
    x, y, z = parse_floats(items[1:4], "coordinate value(s)", line_number)
    return num, x, y, z


def _read_table(lines, start, xyz_format):
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
        if xyz_format is None:
            continue
        if xyz_format == FORMAT_UNEX:
            row = _parse_unex_row(items)
            if row is None:
                if items:
                    logger.debug(f"Skipping unreadable UNEX table row at line {line_number}")
                continue
        elif not items:
            continue
        else:
            row = _parse_mol_row(items, line_number)

        num, x, y, z = row
        atomic_num.append(num)
        xs.append(x)
        ys.append(y)
        zs.append(z)

    return AtomicCoordinates(atomic_num=atomic_num, x=xs, y=ys, z=zs), i


def _read_unex2_header(lines, start):
    """
    Read the table header that follows a 2.x coordinates marker.

    Returns:
        tuple: (declared table format or None, index of the first table row)
    """
    xyz_format = None
    delimiters = 0
    i = start
    while i < len(lines):
        line = lines[i]
        line_number = i + 1
        i += 1
        if "Format:" in line:
            parts = line.split()
            if len(parts) >= 2:
                if parts[1] not in (FORMAT_UNEX, FORMAT_MOL):
                    raise ParseError(
                        f"Invalid or unknown XYZ format {parts[1]} at line {line_number}.", line_number
                    )
                xyz_format = parts[1]
        elif "--" in line:
            if xyz_format == FORMAT_UNEX:
                delimiters += 1
                if delimiters == 2:
                    break
            else:
                break

    if xyz_format is None:
        logger.debug(f"No coordinates format declared in table header at line {start + 1}, ignoring its rows")
    if xyz_format == FORMAT_MOL:
        i += UNEX2_MOL_HEADER_LINES
    return xyz_format, i


def _build_result(file_name, groups):
    children = tuple(
        Node(name=name, type=MOLECULE, children=tuple(sets)) for name, sets in groups.items()
    )
    return Node(name=file_name, type=UNEX, children=children)


def _add_set(groups, molecule_name, coords):
    sets = groups.setdefault(molecule_name, [])
    sets.append(coordinates_node(f"Set#{len(sets) + 1}", coords))


def parse_unex1x(content, file_name):
    lines = split_lines(content)
    groups = {}

    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1
        if UNEX1_MARKER not in line:
            continue

        molecule_name = line.split(">")[0].strip()
        coords, i = _read_table(lines, i + UNEX1_TABLE_HEADER_LINES, FORMAT_UNEX)
        _add_set(groups, molecule_name, coords)

    return _build_result(file_name, groups)


def parse_unex2x(content, file_name):
    lines = split_lines(content)
    groups = {}

    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1
        if UNEX2_MARKER not in line:
            continue

        parts = line.split()
        molecule_name = parts[6].strip() if len(parts) > 6 else "unknown"
        xyz_format, i = _read_unex2_header(lines, i)
        coords, i = _read_table(lines, i, xyz_format)
        _add_set(groups, molecule_name, coords)

    return _build_result(file_name, groups)


def parse(content, file_name):
    """
    Parse UNEX output.

    Returns:
        Node: A unex node with one molecule node per molecule name, each
        holding that molecule's coordinate sets "Set#1", "Set#2", ...

    Raises:
        ParseError: If the first line is not a UNEX banner, or a 2.x table
            is malformed.
    """
    first_line = split_lines(content)[0] if content else ""
    version = get_format_version(first_line)
    if version is None:
        raise ParseError("Invalid UNEX file format at line 1.", 1)

    if version < UNEX2_MIN_VERSION:
        logger.debug(f"UNEX version {version} of {file_name}, using 1.x layout")
        result = parse_unex1x(content, file_name)
    else:
        logger.debug(f"UNEX version {version} of {file_name}, using 2.x layout")
        result = parse_unex2x(content, file_name)
    return result

"""
Gaussian cube file recognizer and parser.

Format::

    Comment line 1
    Comment line 2
    N_atom Ox Oy Oz [nval]  # number of atoms, origin, optional values per voxel
    N1 vx1 vy1 vz1          # grid dimensions and step vectors
    N2 vx2 vy2 vz2
    N3 vx3 vy3 vz3
    Z1 q1 x y z             # atomic number, charge and coordinates (in Bohr)
    ...
    [DSET_IDS]              # data set identifiers if N_atom is negative
    Data on grids           # volumetric data

References:
    - http://paulbourke.net/dataformats/cube/
    - https://h5cube-spec.readthedocs.io/en/latest/cubeformat.html
    - http://gaussian.com/cubegen/
"""

import logging

import numpy as np

from ..errors import ParseError
from ..models import VOLUME_CUBE, AtomicCoordinates, Node, VolumeCube, coordinates_node
from .common import BOHR_TO_ANGSTROM, is_float, is_int, parse_floats, parse_int, read_head, split_lines

logger = logging.getLogger(__name__)

MAX_VALIDATION_LINES = 10


def _looks_like_grid_line(line):
    parts = line.split()
    return len(parts) >= 4 and is_int(parts[0]) and all(is_float(p) for p in parts[1:4])


def test(file_path):
    """Check lines 3-6 of a file for the cube header and grid definition."""
    lines = read_head(file_path, MAX_VALIDATION_LINES)

    # 2 comments + 1 header + 3 grid lines
    if len(lines) < 6:
        return False

    return all(_looks_like_grid_line(line) for line in lines[2:6])


def _next_line(lines, index, what):
    if index >= len(lines):
        raise ParseError(f"Unexpected end of file at line {index + 1}, expected {what}.", index + 1)
    return lines[index]


def _parse_grid_line(line, line_number):
    parts = line.split()
    if len(parts) < 4:
        raise ParseError(f"Invalid grid line at line {line_number}, expected 4 values.", line_number)
    try:
        n = parse_int(parts[0])
    except ValueError:
        raise ParseError(f"Invalid grid count at line {line_number}.", line_number) from None
    if n < 0:
        raise ParseError(
            f"Unsupported negative grid count {n} (Angstrom units) at line {line_number}.", line_number
        )
    vec = parse_floats(parts[1:4], "grid vector value", line_number)
    return n, vec


def parse(content, file_name):
    """
    Parse Gaussian cube content.

    Returns:
        Node: A volume_cube node with a single atomic_coordinates child.

    Raises:
        ParseError: On malformed header, grid or atom lines, unsupported
            multi-value voxels, or a data count that does not match the grid.
    """
    lines = split_lines(content)
    i = 0

    comment1 = _next_line(lines, i, "comment line 1").strip()
    i += 1
    comment2 = _next_line(lines, i, "comment line 2").strip()
    i += 1

    # Number of atoms and origin
    header_parts = _next_line(lines, i, "header line").split()
    i += 1
    if len(header_parts) < 4:
        raise ParseError(f"Invalid header at line {i}, expected at least 4 values.", i)
    try:
        natm_raw = parse_int(header_parts[0])
    except ValueError:
        raise ParseError(f"Invalid number of atoms at line {i}.", i) from None

    if natm_raw > 0 and len(header_parts) > 4:
        try:
            nval = parse_int(header_parts[4])
        except ValueError:
            nval = 1
        if nval > 1:
            raise ParseError(
                f"Unsupported number of data values per voxel {nval} at line {i}.", i
            )

    dset_ids = natm_raw < 0
    natm = abs(natm_raw)
    box_origin = parse_floats(header_parts[1:4], "origin coordinate", i)

    steps_number = []
    steps_size = []
    for _ in range(3):
        line = _next_line(lines, i, "grid line")
        i += 1
        n, vec = _parse_grid_line(line, i)
        steps_number.append(n)
        steps_size.append(vec)

    atomic_num, xs, ys, zs = [], [], [], []
    for _ in range(natm):
        parts = _next_line(lines, i, "atom data").split()
        i += 1
        if len(parts) < 5:
            raise ParseError(f"Invalid atom data at line {i}, expected 5 values.", i)
        try:
            num = parse_int(parts[0])
        except ValueError:
            raise ParseError(f"Invalid atomic number at line {i}.", i) from None
        # parts[1] is the nuclear charge, not used
        x, y, z = parse_floats(parts[2:5], "atom coordinate", i)
        atomic_num.append(num)
        xs.append(x * BOHR_TO_ANGSTROM)
        ys.append(y * BOHR_TO_ANGSTROM)
        zs.append(z * BOHR_TO_ANGSTROM)

    if dset_ids:
        parts = _next_line(lines, i, "DSET_IDS line").split()
        i += 1
        if parts:
            # A non-numeric count is read as a single identifier
            num_ids = parse_int(parts[0]) if is_int(parts[0]) else 1
            if num_ids != 1:
                raise ParseError(
                    f"Unsupported number of identifiers per voxel {num_ids} at line {i}.", i
                )

    values = []
    for line_number in range(i + 1, len(lines) + 1):
        tokens = lines[line_number - 1].split()
        if tokens:
            values.extend(parse_floats(tokens, "volumetric data value", line_number))

    n1, n2, n3 = steps_number
    total_points = n1 * n2 * n3
    if len(values) != total_points:
        raise ParseError(
            f"Mismatch in volumetric data: expected {total_points} points, found {len(values)}.",
            len(lines),
        )

    cube_data = np.array(values, dtype=np.float64).reshape(n1, n2, n3)

    volume_cube = VolumeCube(
        comment1=comment1,
        comment2=comment2,
        box_origin=box_origin,
        steps_number=steps_number,
        steps_size=steps_size,
        cube_data=cube_data,
    )
    coords = AtomicCoordinates(atomic_num=atomic_num, x=xs, y=ys, z=zs)

    logger.debug(f"Parsed cube file {file_name}: {natm} atoms, grid {n1}x{n2}x{n3}")
    return Node(
        name=file_name,
        type=VOLUME_CUBE,
        data=volume_cube.to_bytes(),
        children=(coordinates_node("CubeMol", coords),),
    )

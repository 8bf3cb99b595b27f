"""
File format recognizers and parsers.

``FORMATS`` is the ordered dispatch table: each entry pairs a display name
with the format's ``test(file_path)`` recognizer and its
``parse(content, file_name)`` parser.
"""

from typing import Callable, Iterable, NamedTuple, Tuple

from ..models import Node
from . import cfour, cube, mdlmol2000, unex, xyz


class FileFormat(NamedTuple):
    name: str
    test: Callable[[str], bool]
    parse: Callable[[str, str], Node]


FORMATS: Tuple[FileFormat, ...] = (
    FileFormat("XYZ", xyz.test, xyz.parse),
    FileFormat("Gaussian Cube", cube.test, cube.parse),
    FileFormat("UNEX", unex.test, unex.parse),
    FileFormat("Cfour", cfour.test, cfour.parse),
    FileFormat("MDL Mol V2000", mdlmol2000.test, mdlmol2000.parse),
)


def format_names():
    return [fmt.name for fmt in FORMATS]


def get_format(name):
    """
    Look up a registered format by its display name (case-insensitive).

    Raises:
        ValueError: If no format has that name.
    """
    for fmt in FORMATS:
        if fmt.name.lower() == name.strip().lower():
            return fmt
    raise ValueError(f"Unknown file format: {name!r}. Available: {', '.join(format_names())}")


def select_formats(names: Iterable[str]) -> Tuple[FileFormat, ...]:
    """Registry entries for ``names``, in the given order."""
    return tuple(get_format(name) for name in names)


__all__ = [
    'FileFormat',
    'FORMATS',
    'format_names',
    'get_format',
    'select_formats',
]

# chemistry_importer/file_processing/common.py
"""
Helpers shared by the format recognizers and parsers.
"""

import io
import re
from itertools import islice
from pathlib import Path
from typing import List, Union

from ..errors import ParseError
from ..utils.periodic_table import symbol_to_atomic_number

BOHR_TO_ANGSTROM = 0.529177210903

_UINT_RE = re.compile(r'^\+?[0-9]+$')
_INT_RE = re.compile(r'^[+-]?[0-9]+$')


def read_head(file_path: Union[str, Path], max_lines: int) -> List[str]:
    """
    Read at most ``max_lines`` lines from the start of a file.

    Undecodable bytes are replaced so binary files simply fail recognition.
    OSError (missing or unreadable file) propagates to the caller.
    """
    with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
        return [line.rstrip('\r\n') for line in islice(f, max_lines)]


def split_lines(content: str) -> List[str]:
    """
    Split text into lines the way iterating over a text file does.

    Only LF, CRLF and CR end a line. Form feeds and the other separators
    that ``str.splitlines`` honours stay inside the line.
    """
    return [line.rstrip('\n') for line in io.StringIO(content, newline=None)]


def is_int(token: str) -> bool:
    return bool(_INT_RE.match(token))


def is_float(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def parse_count(token: str) -> int:
    """Parse an unsigned integer, raising ValueError on anything else."""
    if not _UINT_RE.match(token):
        raise ValueError(f"Not an unsigned integer: {token!r}")
    return int(token)


def parse_int(token: str) -> int:
    if not _INT_RE.match(token):
        raise ValueError(f"Not an integer: {token!r}")
    return int(token)


def parse_floats(tokens: List[str], what: str, line_number: int) -> List[float]:
    """Convert tokens to floats, raising ParseError naming ``what`` on failure."""
    try:
        return [float(t) for t in tokens]
    except ValueError:
        raise ParseError(f"Invalid {what} at line {line_number}.", line_number) from None


def resolve_element(token: str, line_number: int) -> int:
    """Atomic number from an element symbol, raising ParseError if unknown."""
    try:
        return symbol_to_atomic_number(token)
    except ValueError:
        raise ParseError(f"Invalid atom symbol {token} at line {line_number}.", line_number) from None

"""
Format dispatcher: picks the right parser for a file with no extension hint.
"""

import logging
from pathlib import Path

from .errors import FormatNotRecognizedError
from .file_processing import FORMATS

logger = logging.getLogger(__name__)


def read_content(file_path):
    """Read a whole file as text; OSError propagates."""
    with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()


def load_file(file_path, formats=None):
    """
    Import a chemistry file into a Node tree.

    Every format's recognizer is tried in registration order. When one accepts
    the file its parser runs; a parser failure is recorded and the next format
    is tried. The first successful parse is returned.

    Args:
        file_path (str or Path): Path to the file.
        formats (sequence of FileFormat, optional): Dispatch table to use
            instead of the full registry.

    Returns:
        Node: The parsed tree.

    Raises:
        OSError: If the file cannot be read.
        FormatNotRecognizedError: If no format both recognized and parsed the file.
    """
    file_path = Path(file_path)
    formats = FORMATS if formats is None else formats
    content = read_content(file_path)
    file_name = file_path.name or "unknown"

    attempts = []
    rejected = []

    for fmt in formats:
        if not fmt.test(file_path):
            logger.debug(f"{file_name}: not recognized as {fmt.name}")
            rejected.append(fmt.name)
            continue

        logger.debug(f"{file_name}: recognized as {fmt.name}, parsing")
        try:
            node = fmt.parse(content, file_name)
        except ValueError as e:
            logger.debug(f"{file_name}: {fmt.name} parser failed: {e}")
            attempts.append((fmt.name, str(e)))
            continue

        logger.info(f"Imported {file_name} as {fmt.name}")
        return node

    raise FormatNotRecognizedError(file_name, attempts, rejected)


def detect_formats(file_path, formats=None):
    """
    Names of all formats whose recognizer accepts the file.

    Raises:
        OSError: If the file cannot be read.
    """
    formats = FORMATS if formats is None else formats
    return [fmt.name for fmt in formats if fmt.test(file_path)]

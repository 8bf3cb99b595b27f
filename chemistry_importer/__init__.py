# chemistry_importer/__init__.py
"""
Chemistry Files Importer

Detects and parses computational-chemistry output files (XYZ, Gaussian cube,
UNEX, Cfour logs and MDL V2000 molfiles) into one normalized tree of nodes
carrying atomic coordinates, molecule summaries and volumetric data.
"""

__version__ = '0.1.0'

from .errors import FormatNotRecognizedError, ImporterError, ParseError
from .importer import detect_formats, load_file
from .models import AtomicCoordinates, Molecule, Node, VolumeCube

__all__ = [
    'AtomicCoordinates',
    'FormatNotRecognizedError',
    'ImporterError',
    'Molecule',
    'Node',
    'ParseError',
    'VolumeCube',
    'detect_formats',
    'load_file',
]

# chemistry_importer/cli/__init__.py
"""
Command-line interface modules for the chemistry importer.
"""

from chemistry_importer.cli.main import main

__all__ = [
    'main'
]

# chemistry_importer/utils/__init__.py
"""
Utility modules for the chemistry importer: logging setup and the periodic table.
"""
from chemistry_importer.utils.logging import get_logger, configure_logging, log_system_info
from chemistry_importer.utils.periodic_table import symbol_to_atomic_number, atomic_number_to_symbol

__all__ = [
    'get_logger',
    'configure_logging',
    'log_system_info',
    'symbol_to_atomic_number',
    'atomic_number_to_symbol',
]

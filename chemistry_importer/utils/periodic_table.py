# chemistry_importer/utils/periodic_table.py
"""
Element symbol <-> atomic number lookup backed by the ``periodictable`` package.
"""

from typing import Optional

import periodictable as pt

# periodictable lists the neutron as element 0; only real elements are kept.
_SYMBOL_TO_NUMBER = {el.symbol: el.number for el in pt.elements if el.number > 0}
_NUMBER_TO_SYMBOL = {number: symbol for symbol, number in _SYMBOL_TO_NUMBER.items()}


def normalize_symbol(symbol: str) -> str:
    """Standardize the case of an element symbol, e.g. 'FE' or 'fe' -> 'Fe'."""
    symbol = symbol.strip()
    return symbol[0].upper() + symbol[1:].lower() if len(symbol) > 1 else symbol.upper()


def symbol_to_atomic_number(symbol: str) -> int:
    """
    Get the atomic number of an element.

    Args:
        symbol: Element symbol, case-insensitive.

    Returns:
        The atomic number (>= 1).

    Raises:
        ValueError: If the symbol is not a known element.
    """
    number = _SYMBOL_TO_NUMBER.get(normalize_symbol(symbol)) if symbol.strip() else None
    if number is None:
        raise ValueError(f"Unknown element symbol: {symbol!r}")
    return number


def atomic_number_to_symbol(number: int) -> Optional[str]:
    """Get the element symbol for an atomic number, or None if there is no such element."""
    return _NUMBER_TO_SYMBOL.get(number)

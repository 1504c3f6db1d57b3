"""
Conversion — перевод чисел между системами счисления.
"""

from ringnum.conversion.base_converter import convert, from_decimal, to_decimal

__all__ = [
    "to_decimal",
    "from_decimal",
    "convert",
]

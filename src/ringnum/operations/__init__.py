"""
Operations — арифметико-логические операции над NumberList.
"""

from ringnum.operations.bitwise_and import bitwise_and

__all__ = [
    "bitwise_and",
]

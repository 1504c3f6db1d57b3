"""
Ring — кольцевой двунаправленный контейнер цифр.
"""

from ringnum.core.ring.circular_list import CircularDigitRing

__all__ = [
    "CircularDigitRing",
]

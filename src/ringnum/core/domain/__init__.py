"""
Domain models and value objects.

Contains the number representation (NumberList) and its exchanged form
(NumberSnapshot).
"""

from ringnum.core.domain.number_list import NumberList
from ringnum.core.domain.snapshot import NumberSnapshot

__all__ = [
    "NumberList",
    "NumberSnapshot",
]

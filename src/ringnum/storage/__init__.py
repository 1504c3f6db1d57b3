"""
Storage — текстовый ввод и файловое хранение чисел.
"""

from ringnum.storage.number_file import (
    load_number,
    load_snapshot,
    parse_decimal_text,
    save_number,
    save_snapshot,
)

__all__ = [
    "parse_decimal_text",
    "load_number",
    "save_number",
    "save_snapshot",
    "load_snapshot",
]

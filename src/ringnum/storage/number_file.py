"""
Number File — текстовый и файловый ввод/вывод чисел

Два формата:
- Текстовый: первая строка файла содержит DecimalString
- JSON снапшот: {"base": int, "decimal": str}, проверяется по number_snapshot.json

Политика ошибок:
- parse_decimal_text / load_number: мягкие, некорректный ввод → пустое число
  (с WARNING в логе)
- save_number / save_snapshot / load_snapshot: строгие, ошибки пробрасываются
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from ringnum.core.config import DEFAULT_CONFIG
from ringnum.core.contracts import validate_number_snapshot
from ringnum.core.domain import NumberList, NumberSnapshot
from ringnum.core.errors import NumberStorageError
from ringnum.core.math.decimal_arithmetic import is_decimal_string
from ringnum.logging_utils import log_operation

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _resolve_base(base: Optional[int]) -> int:
    return DEFAULT_CONFIG.default_base if base is None else base


# =============================================================================
# ТЕКСТ
# =============================================================================


def parse_decimal_text(value: Optional[str], base: Optional[int] = None) -> NumberList:
    """
    Мягкий разбор десятичной записи.

    Пробельные символы по краям отбрасываются. None, пустой текст
    и текст с нецифровыми символами (включая знак и дробную часть)
    дают пустой NumberList.

    Args:
        value: Текст с десятичным числом
        base: Основание результата (default: DEFAULT_CONFIG.default_base)

    Returns:
        NumberList в основании base
    """
    base = _resolve_base(base)

    if value is None:
        return NumberList(base)

    text = value.strip()
    if not text:
        return NumberList(base)

    if not is_decimal_string(text):
        logger.warning(
            "Ignoring non-decimal input",
            extra={"operation": "parse_decimal_text", "value": text[:64]},
        )
        return NumberList(base)

    return NumberList.from_decimal(text, base)


# =============================================================================
# ТЕКСТОВЫЙ ФАЙЛ
# =============================================================================


def load_number(path: PathLike, base: Optional[int] = None) -> NumberList:
    """
    Загрузка числа из текстового файла (десятичная запись в первой строке).

    Отсутствующий, пустой или нечитаемый файл даёт пустой NumberList.

    Args:
        path: Путь к файлу
        base: Основание результата (default: DEFAULT_CONFIG.default_base)
    """
    base = _resolve_base(base)
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            first_line = f.readline()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(
            "Cannot read number file, using empty number",
            extra={"operation": "load_number", "path": str(path), "error": str(e)},
        )
        return NumberList(base)

    if not first_line.strip():
        logger.warning(
            "Number file is empty, using empty number",
            extra={"operation": "load_number", "path": str(path)},
        )
        return NumberList(base)

    with log_operation(logger, "load_number", level=logging.INFO, path=str(path)):
        return parse_decimal_text(first_line, base)


def save_number(path: PathLike, number: NumberList) -> None:
    """
    Сохранение десятичного значения числа в текстовый файл.

    Raises:
        NumberStorageError: Если файл не может быть создан или записан
    """
    path = Path(path)

    with log_operation(logger, "save_number", level=logging.INFO, path=str(path)):
        decimal = number.to_decimal_string()
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(decimal)
        except OSError as e:
            raise NumberStorageError(f"Cannot save number to file: {path}") from e


# =============================================================================
# JSON СНАПШОТ
# =============================================================================


def save_snapshot(path: PathLike, number: NumberList) -> NumberSnapshot:
    """
    Сохранение числа как JSON снапшота {"base", "decimal"}.

    Returns:
        Записанный NumberSnapshot

    Raises:
        NumberStorageError: Если файл не может быть создан или записан
    """
    path = Path(path)

    with log_operation(logger, "save_snapshot", level=logging.INFO, path=str(path)):
        snapshot = NumberSnapshot.from_number(number)
        payload = snapshot.model_dump()
        validate_number_snapshot(payload)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(payload, f)
        except OSError as e:
            raise NumberStorageError(f"Cannot save snapshot to file: {path}") from e
        return snapshot


def load_snapshot(path: PathLike) -> NumberList:
    """
    Загрузка числа из JSON снапшота.

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если данные не соответствуют контракту
    """
    path = Path(path)

    with log_operation(logger, "load_snapshot", level=logging.INFO, path=str(path)):
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)

        validate_number_snapshot(payload)
        return NumberSnapshot.model_validate(payload).to_number()

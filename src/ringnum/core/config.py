"""
Config — параметры систем счисления

Константы оснований и конфигурация NumberList:
- default_base: основание, в котором хранится число по умолчанию (трёхричная)
- scale_base: основание для change_scale() (восьмеричная)
- and_output_base: основание результата additional_operation() (трёхричная)
"""

from dataclasses import dataclass
from typing import Final

from ringnum.core.errors import BaseRangeError


# =============================================================================
# КОНСТАНТЫ ОСНОВАНИЙ
# =============================================================================

# Минимально допустимое основание
MIN_BASE: Final[int] = 2

# Двоичное основание (промежуточное представление для AND)
BINARY_BASE: Final[int] = 2

# Основание DecimalString
DECIMAL_BASE: Final[int] = 10


def validate_base(base: object) -> int:
    """
    Проверка основания системы счисления.

    Args:
        base: Проверяемое основание

    Returns:
        base как int

    Raises:
        BaseRangeError: Если base не int или base < MIN_BASE
    """
    if isinstance(base, bool) or not isinstance(base, int) or base < MIN_BASE:
        raise BaseRangeError(base)
    return base


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class NumberSystemConfig:
    """Конфигурация оснований для NumberList.

    Immutable: каждый NumberList хранит ссылку на свой конфиг,
    результаты конвертации наследуют конфиг источника.
    """

    default_base: int = 3
    scale_base: int = 8
    and_output_base: int = 3

    def __post_init__(self) -> None:
        validate_base(self.default_base)
        validate_base(self.scale_base)
        validate_base(self.and_output_base)


# Конфигурация по умолчанию
DEFAULT_CONFIG: Final[NumberSystemConfig] = NumberSystemConfig()

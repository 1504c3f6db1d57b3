"""Shared helpers for structured operation logging."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from time import perf_counter
from typing import Dict, Generator

from ringnum.core.errors import RingNumError

# Ошибки вызывающего кода: логируются без traceback
_EXPECTED_ERRORS = (RingNumError, ValueError, IndexError)


def _duration_ms(start: float) -> float:
    return round((perf_counter() - start) * 1000, 3)


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
    **context: object,
) -> Generator[Dict[str, object], None, None]:
    """Emit structured logs around an operation.

    Parameters
    ----------
    logger:
        Logger to emit records to.
    operation:
        Identifier for the operation (e.g. ``"to_decimal"``).
    level:
        Level of the success record.
    context:
        Additional key/value pairs to include in the log context. The yielded
        mapping can be mutated to add dynamic values before completion.
    """

    start = perf_counter()
    base: Dict[str, object] = {"operation": operation, **context}

    try:
        yield base
    except _EXPECTED_ERRORS as exc:
        logger.warning(
            "%s failed",
            operation,
            extra={
                **base,
                "status": "error",
                "duration_ms": _duration_ms(start),
                "error": str(exc),
            },
        )
        raise
    except Exception as exc:
        logger.exception(
            "%s failed",
            operation,
            extra={
                **base,
                "status": "error",
                "duration_ms": _duration_ms(start),
                "error": str(exc),
            },
        )
        raise
    else:
        logger.log(
            level,
            "%s completed",
            operation,
            extra={**base, "status": "success", "duration_ms": _duration_ms(start)},
        )

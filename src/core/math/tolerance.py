"""
Tolerance — Сравнение координат с учётом машинной точности

Модуль дополняет точное равенство координат сравнением в пределах
толерантности скаляра: законы вида sub(add(a, b), b) == a для float
выполняются только приближённо.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение покомпонентное, по индексам 0..DIM-1, с коротким замыканием
2. Толерантности неотрицательны
3. NaN не равен ничему (включая NaN), как в math.isclose
"""

import math
from typing import Any, Final

from src.core.math.coordinate_ops import all_satisfy

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность покомпонентного сравнения
EPS_COORD_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность покомпонентного сравнения
# Нужна для компонент, близких к нулю, где относительная бесполезна
EPS_COORD_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def coordinates_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_COORD_COMPARE_REL,
    abs_tol: float = EPS_COORD_COMPARE_ABS,
) -> bool:
    """
    Покомпонентное сравнение координат с учётом толерантности.

    Для каждого i:
        abs(a_i - b_i) <= max(rel_tol * max(abs(a_i), abs(b_i)), abs_tol)

    Args:
        a: Первая координата
        b: Вторая координата (того же типа)
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если все компоненты близки

    Raises:
        ValueError: Если толерантность отрицательная
        TypeError: Если a и b разных типов

    Examples:
        >>> coordinates_close(Point2D(x=0.1 + 0.2, y=1.0), Point2D(x=0.3, y=1.0))
        True
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(
            f"Tolerances must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}"
        )

    return all_satisfy(
        a,
        b,
        lambda left, right: math.isclose(left, right, rel_tol=rel_tol, abs_tol=abs_tol),
    )


def is_finite_coordinate(coord: Any) -> bool:
    """
    Проверка, что все компоненты конечны (не NaN, не Inf).

    Returns:
        True если каждая компонента finite
    """
    return all_satisfy(coord, coord, lambda value, _: math.isfinite(value))

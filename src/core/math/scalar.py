"""
Scalar — Числовой контракт компонент координаты

Модуль описывает минимальный числовой контракт, которому должен
удовлетворять тип компонент координаты:
- Нулевое значение (scalar_type() → 0)
- Сложение, вычитание, умножение
- Упорядочивание (только оператор <)

Контракт не привязан к конкретному представлению: int, float, Decimal,
Fraction и numpy-скаляры удовлетворяют ему без адаптеров.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль типа получается вызовом конструктора без аргументов
2. min/max используют только оператор < (без __le__, __gt__)
3. Числовые ошибки (overflow, NaN) не перехватываются и не подавляются
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

# =============================================================================
# EXCEPTIONS
# =============================================================================


class ScalarContractViolation(TypeError):
    """
    Тип не удовлетворяет числовому контракту Scalar.

    Возникает, если тип не умеет создавать нулевое значение
    или его ноль не поддерживает операции +, -, *, <.
    """
    pass


# =============================================================================
# SCALAR PROTOCOL
# =============================================================================

# Операции, обязательные для скаляра
SCALAR_OPERATIONS: tuple[str, ...] = ("__add__", "__sub__", "__mul__", "__lt__")


@runtime_checkable
class Scalar(Protocol):
    """Числовой скаляр: +, -, * и упорядочивание через <."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


ScalarT = TypeVar("ScalarT", bound=Scalar)


def is_scalar_type(scalar_type: Any) -> bool:
    """
    Проверка на уровне типа, что scalar_type реализует операции Scalar.

    Args:
        scalar_type: Проверяемый тип

    Returns:
        True если тип — класс со всеми операциями из SCALAR_OPERATIONS

    Examples:
        >>> is_scalar_type(float)
        True
        >>> is_scalar_type(str)  # нет __sub__
        False
    """
    if not isinstance(scalar_type, type):
        return False
    return all(callable(getattr(scalar_type, op, None)) for op in SCALAR_OPERATIONS)


# =============================================================================
# ZERO / ORDERING
# =============================================================================


def scalar_zero(scalar_type: type[ScalarT]) -> ScalarT:
    """
    Нулевое значение скалярного типа.

    Ноль получается вызовом конструктора без аргументов:
    int() == 0, float() == 0.0, Decimal() == Decimal('0'), Fraction() == 0.

    Args:
        scalar_type: Скалярный тип

    Returns:
        Нулевое значение типа

    Raises:
        ScalarContractViolation: Если тип не создаёт ноль или ноль не Scalar

    Examples:
        >>> scalar_zero(int)
        0
        >>> scalar_zero(float)
        0.0
    """
    if not is_scalar_type(scalar_type):
        raise ScalarContractViolation(
            f"{scalar_type!r} does not implement {', '.join(SCALAR_OPERATIONS)}"
        )

    try:
        zero = scalar_type()
    except TypeError as e:
        raise ScalarContractViolation(
            f"{scalar_type.__name__}() cannot produce a zero value: {e}"
        ) from e

    if not isinstance(zero, Scalar):
        raise ScalarContractViolation(
            f"{scalar_type.__name__}() returned non-scalar value {zero!r}"
        )

    return zero


def scalar_min(a: ScalarT, b: ScalarT) -> ScalarT:
    """
    Минимум двух скаляров через оператор <.

    При равенстве возвращается первый аргумент.

    Examples:
        >>> scalar_min(2, 1)
        1
        >>> scalar_min(1.5, 7.0)
        1.5
    """
    if b < a:
        return b
    return a


def scalar_max(a: ScalarT, b: ScalarT) -> ScalarT:
    """
    Максимум двух скаляров через оператор <.

    При равенстве возвращается первый аргумент.

    Examples:
        >>> scalar_max(2, 1)
        2
        >>> scalar_max(1.5, 7.0)
        7.0
    """
    if a < b:
        return b
    return a

"""
Coordinate — Контракт координаты фиксированной размерности

Координата — кортеж фиксированной длины DIM из однородных числовых
компонент (скаляров). Контракт требует ровно три примитива:
- generate(index_fn): построение значения по функции индекса
- value_at(i): чтение компоненты
- set_value_at(i, value): запись компоненты на месте

Все производные операции (сложение, границы, расстояния) реализованы один
раз в coordinate_ops поверх этих примитивов и не требуют наследования.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. DIM — неотрицательная константа уровня класса
2. Любой индекс доступа удовлетворяет 0 <= i < DIM
3. Выход индекса за границы — нарушение контракта (CoordinateIndexError),
   восстановление не предусмотрено
4. generate вызывает index_fn ровно один раз для каждого i, по порядку
"""

from typing import Any, Callable, ClassVar, Protocol, TypeVar, runtime_checkable

from src.core.math.scalar import ScalarContractViolation, scalar_zero

# =============================================================================
# EXCEPTIONS
# =============================================================================


class CoordinateContractViolation(Exception):
    """
    Нарушение контракта Coordinate.

    Ошибка программиста, а не данных: размерность и допустимые индексы
    известны на уровне типа. Внутри пакета не перехватывается.
    """
    pass


class CoordinateIndexError(CoordinateContractViolation, IndexError):
    """Индекс компоненты вне диапазона [0, DIM)."""
    pass


# =============================================================================
# COORDINATE PROTOCOL
# =============================================================================


@runtime_checkable
class Coordinate(Protocol):
    """
    Координата фиксированной размерности.

    Атрибуты класса:
        DIM: Количество компонент
        SCALAR: Тип компонент (контракт Scalar, ноль = SCALAR())
    """

    DIM: ClassVar[int]
    SCALAR: ClassVar[type]

    @classmethod
    def generate(cls, index_fn: Callable[[int], Any]) -> Any:
        """Новое значение: компонента i = index_fn(i) для i in [0, DIM)."""
        ...

    def value_at(self, i: int) -> Any:
        """Компонента с индексом i."""
        ...

    def set_value_at(self, i: int, value: Any) -> None:
        """Запись компоненты с индексом i на месте."""
        ...


CoordT = TypeVar("CoordT", bound=Coordinate)


def is_coordinate(value: Any) -> bool:
    """Структурная проверка: значение реализует контракт Coordinate."""
    return isinstance(value, Coordinate)


# =============================================================================
# ПРОВЕРКИ КОНТРАКТА
# =============================================================================


def check_index(i: int, dim: int) -> None:
    """
    Проверка индекса компоненты.

    Args:
        i: Индекс (только int, bool не допускается)
        dim: Размерность координаты

    Raises:
        CoordinateIndexError: Если i не int или i вне [0, dim)
    """
    if isinstance(i, bool) or not isinstance(i, int):
        raise CoordinateIndexError(f"Coordinate index must be int, got {i!r}")

    if not 0 <= i < dim:
        raise CoordinateIndexError(f"Coordinate index {i} out of range [0, {dim})")


def _raises_index_error(access: Callable[..., Any], *args: Any) -> bool:
    try:
        access(*args)
    except CoordinateIndexError:
        return True
    return False


def validate_coordinate_type(coord_type: type) -> None:
    """
    Проверка инвариантов типа координаты.

    Python не знает целочисленных generics, поэтому размерность проверяется
    не компилятором, а этой функцией (в тестах или при регистрации типа):
    1. DIM — неотрицательный int
    2. SCALAR удовлетворяет контракту Scalar и имеет ноль
    3. generate вызывает index_fn ровно для 0..DIM-1 по порядку
       и возвращает экземпляр coord_type
    4. Все индексы 0..DIM-1 читаются и записываются
    5. Индексы -1 и DIM отвергаются с CoordinateIndexError

    Args:
        coord_type: Проверяемый тип координаты

    Raises:
        CoordinateContractViolation: При нарушении любого инварианта
    """
    name = getattr(coord_type, "__name__", repr(coord_type))

    dim = getattr(coord_type, "DIM", None)
    if isinstance(dim, bool) or not isinstance(dim, int) or dim < 0:
        raise CoordinateContractViolation(
            f"{name}.DIM must be a non-negative int, got {dim!r}"
        )

    for primitive in ("generate", "value_at", "set_value_at"):
        if not callable(getattr(coord_type, primitive, None)):
            raise CoordinateContractViolation(f"{name} does not implement {primitive}()")

    try:
        zero = scalar_zero(getattr(coord_type, "SCALAR", None))
    except ScalarContractViolation as e:
        raise CoordinateContractViolation(f"{name}.SCALAR is not a scalar type: {e}") from e

    visited: list[int] = []

    def index_fn(i: int) -> Any:
        visited.append(i)
        return zero

    value = coord_type.generate(index_fn)

    if visited != list(range(dim)):
        raise CoordinateContractViolation(
            f"{name}.generate must call index_fn for indices 0..{dim - 1} in order, "
            f"got {visited}"
        )

    if not isinstance(value, coord_type):
        raise CoordinateContractViolation(
            f"{name}.generate returned {type(value).__name__}, expected {name}"
        )

    for i in range(dim):
        value.set_value_at(i, value.value_at(i))

    for i in (-1, dim):
        if not _raises_index_error(value.value_at, i):
            raise CoordinateContractViolation(
                f"{name}.value_at({i}) must raise CoordinateIndexError"
            )
        if not _raises_index_error(value.set_value_at, i, zero):
            raise CoordinateContractViolation(
                f"{name}.set_value_at({i}, ...) must raise CoordinateIndexError"
            )

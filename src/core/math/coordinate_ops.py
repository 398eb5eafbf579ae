"""
Coordinate Operations — Производные операции над координатами

Все операции выражены только через три примитива контракта Coordinate
(generate, value_at, set_value_at) и реализованы один раз как свободные
функции: любой тип, реализующий примитивы, получает их без наследования.

Операции:
- Конструирование: origin, new_from_value
- Покомпонентные: component_wise, add, sub, diff, min_of_bounds, max_of_bounds
- Отображения и свёртки: map_components, scale, fold
- Метрики: square_length, square_distance (без извлечения корня)
- Предикаты: all_satisfy (с коротким замыканием)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обход компонент всегда идёт по индексам 0..DIM-1 по возрастанию
2. all_satisfy прекращает обход на первом ложном предикате
3. Операции чистые: аргументы не изменяются (кроме update_value_at)
4. Числовые ошибки скаляра пропагируют без изменений
"""

from typing import Any, Callable

from src.core.math.coordinate import CoordT
from src.core.math.scalar import scalar_max, scalar_min, scalar_zero

BinaryOp = Callable[[Any, Any], Any]
BinaryPredicate = Callable[[Any, Any], bool]


def _check_same_type(a: Any, b: Any) -> None:
    if type(a) is not type(b):
        raise TypeError(
            f"Component-wise operation requires coordinates of the same type, "
            f"got {type(a).__name__} and {type(b).__name__}"
        )


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def new_from_value(coord_type: type[CoordT], value: Any) -> CoordT:
    """
    Координата, все компоненты которой равны value.

    Args:
        coord_type: Тип координаты
        value: Значение каждой компоненты

    Returns:
        coord_type.generate(lambda _: value)
    """
    return coord_type.generate(lambda _: value)


def origin(coord_type: type[CoordT]) -> CoordT:
    """
    Начало координат: все компоненты равны нулю скаляра.

    Args:
        coord_type: Тип координаты

    Returns:
        new_from_value(coord_type, SCALAR())
    """
    return new_from_value(coord_type, scalar_zero(coord_type.SCALAR))


# =============================================================================
# ПОКОМПОНЕНТНЫЕ ОПЕРАЦИИ
# =============================================================================


def component_wise(a: CoordT, b: CoordT, func: BinaryOp) -> CoordT:
    """
    Покомпонентное применение бинарной функции.

    Компонента i результата = func(a.value_at(i), b.value_at(i)).
    Базовый блок для add, sub, min_of_bounds, max_of_bounds.

    Args:
        a: Левая координата
        b: Правая координата (того же типа)
        func: Функция (left, right) -> scalar

    Returns:
        Новая координата типа a

    Raises:
        TypeError: Если a и b разных типов
    """
    _check_same_type(a, b)
    return type(a).generate(lambda i: func(a.value_at(i), b.value_at(i)))


def all_satisfy(a: CoordT, b: CoordT, predicate: BinaryPredicate) -> bool:
    """
    Проверка предиката для всех пар компонент с коротким замыканием.

    Предикат вызывается для индексов 0, 1, 2, ... строго по возрастанию;
    после первого ложного результата оставшиеся индексы не проверяются.

    Args:
        a: Левая координата
        b: Правая координата (того же типа)
        predicate: Предикат (left, right) -> bool

    Returns:
        True если предикат истинен для всех DIM индексов
        (True для DIM == 0)

    Examples:
        >>> all_satisfy(GridPoint2D(x=2, y=2), GridPoint2D(x=8, y=10),
        ...             lambda l, r: l % 2 == 0 and r % 2 == 0)
        True
    """
    _check_same_type(a, b)

    for i in range(a.DIM):
        if not predicate(a.value_at(i), b.value_at(i)):
            return False

    return True


def min_of_bounds(a: CoordT, b: CoordT) -> CoordT:
    """Покомпонентный минимум: нижний угол bounding box, содержащего a и b."""
    return component_wise(a, b, scalar_min)


def max_of_bounds(a: CoordT, b: CoordT) -> CoordT:
    """Покомпонентный максимум: верхний угол bounding box, содержащего a и b."""
    return component_wise(a, b, scalar_max)


def add(a: CoordT, b: CoordT) -> CoordT:
    """Покомпонентная сумма a + b."""
    return component_wise(a, b, lambda left, right: left + right)


def sub(a: CoordT, b: CoordT) -> CoordT:
    """Покомпонентная разность a - b."""
    return component_wise(a, b, lambda left, right: left - right)


def diff(current: CoordT, reference: CoordT) -> CoordT:
    """
    Смещение current относительно reference.

    Полный синоним sub(current, reference); отдельное имя только для
    читаемости геометрических расчётов.
    """
    return sub(current, reference)


# =============================================================================
# ОТОБРАЖЕНИЯ И СВЁРТКИ
# =============================================================================


def map_components(coord: CoordT, transform: Callable[[Any], Any]) -> CoordT:
    """
    Применение transform к каждой компоненте независимо.

    Args:
        coord: Исходная координата
        transform: Функция scalar -> scalar

    Returns:
        Новая координата того же типа
    """
    return type(coord).generate(lambda i: transform(coord.value_at(i)))


def scale(coord: CoordT, k: Any) -> CoordT:
    """
    Умножение всех компонент на скаляр k.

    Скаляр стоит слева: компонента i = k * value_at(i).

    Examples:
        >>> scale(Point2D(x=2.0, y=2.0), 3.0)
        Point2D(x=6.0, y=6.0)
    """
    return map_components(coord, lambda v: k * v)


def fold(coord: Any, start: Any, func: BinaryOp) -> Any:
    """
    Свёртка компонент слева направо.

    total = func(total, value_at(i)) для i = 0..DIM-1, начиная с start.
    Порядок существенен для некоммутативных func и всегда воспроизводим.

    Args:
        coord: Координата
        start: Начальное значение аккумулятора
        func: Функция (total, component) -> total

    Returns:
        Итоговое значение аккумулятора (start для DIM == 0)
    """
    total = start
    for i in range(coord.DIM):
        total = func(total, coord.value_at(i))
    return total


# =============================================================================
# МЕТРИКИ
# =============================================================================


def square_length(coord: Any) -> Any:
    """
    Квадрат евклидовой длины: сумма квадратов компонент.

    Корень не извлекается: контракт Scalar не требует sqrt.

    Examples:
        >>> square_length(Point2D(x=3.0, y=4.0))
        25.0
    """
    return fold(coord, scalar_zero(coord.SCALAR), lambda acc, v: acc + v * v)


def square_distance(a: CoordT, b: CoordT) -> Any:
    """
    Квадрат евклидова расстояния между a и b.

    square_length(diff(a, b))

    Examples:
        >>> square_distance(Point2D(x=1.0, y=1.0), Point2D(x=4.0, y=5.0))
        25.0
    """
    return square_length(diff(a, b))


# =============================================================================
# ДОСТУП К КОМПОНЕНТАМ
# =============================================================================


def components(coord: Any) -> tuple[Any, ...]:
    """Компоненты координаты в порядке индексов."""
    return tuple(coord.value_at(i) for i in range(coord.DIM))


def update_value_at(coord: Any, i: int, func: Callable[[Any], Any]) -> None:
    """
    Изменение компоненты на месте: value_at(i) = func(value_at(i)).

    Единственная операция модуля, изменяющая аргумент. Конкурентные
    записи в одну координату должен сериализовать вызывающий код.

    Raises:
        CoordinateIndexError: Если i вне [0, DIM)
    """
    coord.set_value_at(i, func(coord.value_at(i)))

"""
Points — Конкретные типы координат

Pydantic модели точек 2D/3D над float и int, реализующие контракт
Coordinate. Компоненты валидируются при создании и при записи
(validate_assignment=True), поэтому GridPoint не примет дробное значение
ни через конструктор, ни через set_value_at.

Все производные операции берутся из coordinate_ops; операторы +, -, *
лишь делегируют туда.
"""

from typing import Any, Callable, ClassVar

from pydantic import BaseModel, Field

from src.core.math.coordinate import check_index
from src.core.math.coordinate_ops import add, components, scale, sub


# =============================================================================
# BASE
# =============================================================================


class AxisPoint(BaseModel):
    """
    Общая реализация примитивов Coordinate для точек с именованными осями.

    Индекс i соответствует полю AXES[i]; DIM == len(AXES).
    Наследники объявляют AXES, DIM, SCALAR и поля осей.
    """

    AXES: ClassVar[tuple[str, ...]] = ()
    DIM: ClassVar[int] = 0
    SCALAR: ClassVar[type] = float

    model_config = {"validate_assignment": True}

    @classmethod
    def generate(cls, index_fn: Callable[[int], Any]) -> "AxisPoint":
        """Новая точка: ось AXES[i] = index_fn(i), оси по порядку."""
        return cls(**{axis: index_fn(i) for i, axis in enumerate(cls.AXES)})

    def value_at(self, i: int) -> Any:
        check_index(i, self.DIM)
        return getattr(self, self.AXES[i])

    def set_value_at(self, i: int, value: Any) -> None:
        check_index(i, self.DIM)
        setattr(self, self.AXES[i], value)

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, AxisPoint):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, AxisPoint):
            return NotImplemented
        return sub(self, other)

    def __mul__(self, k: Any) -> Any:
        if isinstance(k, AxisPoint):
            return NotImplemented
        return scale(self, k)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"({', '.join(str(v) for v in components(self))})"


# =============================================================================
# FLOAT POINTS
# =============================================================================


class Point2D(AxisPoint):
    """Точка на плоскости с float-компонентами."""

    AXES: ClassVar[tuple[str, ...]] = ("x", "y")
    DIM: ClassVar[int] = 2
    SCALAR: ClassVar[type] = float

    x: float = Field(..., description="Компонента по оси X")
    y: float = Field(..., description="Компонента по оси Y")


class Point3D(AxisPoint):
    """Точка в пространстве с float-компонентами."""

    AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z")
    DIM: ClassVar[int] = 3
    SCALAR: ClassVar[type] = float

    x: float = Field(..., description="Компонента по оси X")
    y: float = Field(..., description="Компонента по оси Y")
    z: float = Field(..., description="Компонента по оси Z")


# =============================================================================
# INTEGER (GRID) POINTS
# =============================================================================


class GridPoint2D(AxisPoint):
    """Узел целочисленной сетки на плоскости."""

    AXES: ClassVar[tuple[str, ...]] = ("x", "y")
    DIM: ClassVar[int] = 2
    SCALAR: ClassVar[type] = int

    x: int = Field(..., description="Индекс узла по оси X")
    y: int = Field(..., description="Индекс узла по оси Y")


class GridPoint3D(AxisPoint):
    """Узел целочисленной сетки в пространстве."""

    AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z")
    DIM: ClassVar[int] = 3
    SCALAR: ClassVar[type] = int

    x: int = Field(..., description="Индекс узла по оси X")
    y: int = Field(..., description="Индекс узла по оси Y")
    z: int = Field(..., description="Индекс узла по оси Z")

"""
Тесты для модуля Tolerance

Проверяет:
1. Сравнение координат с учётом машинной точности
2. Поведение на NaN/Inf
3. Валидацию толерантностей
"""

import math

import pytest

from src.core.domain import GridPoint2D, Point2D, Point3D
from src.core.math.coordinate_ops import add, sub
from src.core.math.tolerance import (
    EPS_COORD_COMPARE_ABS,
    EPS_COORD_COMPARE_REL,
    coordinates_close,
    is_finite_coordinate,
)


class TestCoordinatesClose:
    """Тесты для coordinates_close"""

    def test_defaults(self) -> None:
        """Значения толерантностей по умолчанию"""
        assert EPS_COORD_COMPARE_REL == 1e-9
        assert EPS_COORD_COMPARE_ABS == 1e-12

    def test_exactly_equal(self) -> None:
        """Равные координаты близки"""
        a = Point2D(x=1.5, y=-2.0)
        assert coordinates_close(a, Point2D(x=1.5, y=-2.0))

    def test_rounding_error_tolerated(self) -> None:
        """0.1 + 0.2 ≈ 0.3"""
        a = Point2D(x=0.1 + 0.2, y=1.0)
        b = Point2D(x=0.3, y=1.0)
        assert a != b
        assert coordinates_close(a, b)

    def test_add_sub_roundtrip(self) -> None:
        """Инвариант: (a + b) - b ≈ a"""
        a = Point3D(x=0.1, y=0.7, z=-3.3)
        b = Point3D(x=0.2, y=1e6, z=2.2)
        assert coordinates_close(sub(add(a, b), b), a, rel_tol=1e-6, abs_tol=1e-9)

    def test_far_apart(self) -> None:
        """Отличие в одной компоненте"""
        assert not coordinates_close(Point2D(x=1.0, y=1.0), Point2D(x=1.0, y=1.1))

    def test_near_zero_uses_abs_tol(self) -> None:
        """Около нуля работает абсолютная толерантность"""
        assert coordinates_close(Point2D(x=0.0, y=0.0), Point2D(x=1e-13, y=0.0))
        assert not coordinates_close(Point2D(x=0.0, y=0.0), Point2D(x=1e-6, y=0.0))

    def test_custom_tolerance(self) -> None:
        """Пользовательская толерантность"""
        a = Point2D(x=100.0, y=0.0)
        b = Point2D(x=101.0, y=0.0)
        assert not coordinates_close(a, b)
        assert coordinates_close(a, b, rel_tol=0.02)

    def test_int_points(self) -> None:
        """Целочисленные координаты сравниваются точно"""
        assert coordinates_close(GridPoint2D(x=3, y=4), GridPoint2D(x=3, y=4))
        assert not coordinates_close(GridPoint2D(x=3, y=4), GridPoint2D(x=3, y=5))

    def test_nan_never_close(self) -> None:
        """NaN не близок ничему"""
        a = Point2D(x=math.nan, y=0.0)
        assert not coordinates_close(a, a)

    def test_negative_tolerance_raises(self) -> None:
        """Отрицательная толерантность вызывает ошибку"""
        a = Point2D(x=0.0, y=0.0)
        with pytest.raises(ValueError, match="non-negative"):
            coordinates_close(a, a, rel_tol=-1e-9)

        with pytest.raises(ValueError, match="non-negative"):
            coordinates_close(a, a, abs_tol=-1e-12)

    def test_different_types_raise(self) -> None:
        """Разные типы координат не сравниваются"""
        with pytest.raises(TypeError):
            coordinates_close(Point2D(x=0.0, y=0.0), GridPoint2D(x=0, y=0))


class TestIsFiniteCoordinate:
    """Тесты для is_finite_coordinate"""

    def test_finite(self) -> None:
        """Конечные компоненты"""
        assert is_finite_coordinate(Point3D(x=1.0, y=-1e300, z=0.0))
        assert is_finite_coordinate(GridPoint2D(x=10**20, y=0))

    def test_nan(self) -> None:
        """NaN в любой компоненте"""
        assert not is_finite_coordinate(Point2D(x=0.0, y=math.nan))

    def test_inf(self) -> None:
        """Inf в любой компоненте"""
        assert not is_finite_coordinate(Point2D(x=math.inf, y=0.0))
        assert not is_finite_coordinate(Point2D(x=0.0, y=-math.inf))

    def test_overflow_propagates(self) -> None:
        """Переполнение скаляра не подавляется операциями"""
        big = Point2D(x=1e308, y=0.0)
        assert not is_finite_coordinate(add(big, big))

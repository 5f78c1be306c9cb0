"""
Тесты для пространственных фильтров.
"""

from __future__ import annotations

import math
from typing import Callable

import pytest

from src.core.locations.models import AreaBoundary, UserCurrentLocation
from src.core.locations.spatial import (
    degree_distance,
    filter_in_area,
    filter_near,
    is_in_area,
    is_near,
    resolve_longitude_bounds,
)


def _boundary(north: float, south: float, west: float, east: float) -> AreaBoundary:
    return AreaBoundary(
        northern_boundary=north,
        southern_boundary=south,
        western_boundary=west,
        eastern_boundary=east,
    )


class TestResolveLongitudeBounds:
    """Тесты выбора левой и правой границы."""

    def test_within_90_ordered(self) -> None:
        """Границы в пределах ±90, запад < восток."""
        assert resolve_longitude_bounds(_boundary(10, 0, -10, 10)) == (-10, 10)

    def test_within_90_reversed(self) -> None:
        """Границы в пределах ±90, запад > восток: всё равно (min, max)."""
        assert resolve_longitude_bounds(_boundary(10, 0, 10, -10)) == (-10, 10)

    def test_beyond_90_west_greater(self) -> None:
        """Граница за ±90, запад > восток: (max, min)."""
        assert resolve_longitude_bounds(_boundary(10, 0, 170, -170)) == (170, -170)

    def test_beyond_90_west_smaller(self) -> None:
        """Граница за ±90, запад < восток: тоже (max, min)."""
        assert resolve_longitude_bounds(_boundary(10, 0, -100, 120)) == (120, -100)

    def test_exactly_90_counts_as_within(self) -> None:
        """|90| ещё считается «в пределах»."""
        assert resolve_longitude_bounds(_boundary(10, 0, 90, -90)) == (-90, 90)


class TestIsInArea:
    """Тесты попадания в область."""

    def test_longitude_outside_box_is_included(self, make_location: Callable[..., UserCurrentLocation]) -> None:
        """
        Точка (5, 20) при {N=10, S=0, W=-10, E=10}.
        left=-10, right=10; 20 > -10 — условие ИЛИ выполнено, точка включается.
        """
        boundary = _boundary(10, 0, -10, 10)

        assert is_in_area(make_location(latitude=5, longitude=20), boundary) is True

    def test_latitude_bounds_are_strict(self, make_location: Callable[..., UserCurrentLocation]) -> None:
        """Точки на северной и южной границе не включаются."""
        boundary = _boundary(10, 0, -10, 10)

        assert is_in_area(make_location(latitude=10, longitude=0), boundary) is False
        assert is_in_area(make_location(latitude=0, longitude=0), boundary) is False
        assert is_in_area(make_location(latitude=9.999, longitude=0), boundary) is True

    def test_latitude_outside_excluded(self, make_location: Callable[..., UserCurrentLocation]) -> None:
        """Точка южнее области не включается при любой долготе."""
        boundary = _boundary(10, 0, -10, 10)

        assert is_in_area(make_location(latitude=-5, longitude=0), boundary) is False

    def test_or_rule_beyond_90(self, make_location: Callable[..., UserCurrentLocation]) -> None:
        """
        Область через антимеридиан: W=170, E=-170 → left=170, right=-170.
        Долгота 175 > 170 и -175 < -170 включаются, 0 — нет.
        """
        boundary = _boundary(10, -10, 170, -170)

        assert is_in_area(make_location(latitude=0, longitude=175), boundary) is True
        assert is_in_area(make_location(latitude=0, longitude=-175), boundary) is True
        assert is_in_area(make_location(latitude=0, longitude=0), boundary) is False

    def test_point_on_both_longitude_bounds(self, make_location: Callable[..., UserCurrentLocation]) -> None:
        """При left=-10, right=10 долгота -10 проходит по условию lon < right."""
        boundary = _boundary(10, 0, -10, 10)

        assert is_in_area(make_location(latitude=5, longitude=-10), boundary) is True


class TestFilterInArea:
    """Тесты фильтра по области."""

    def test_keeps_order(self, make_location: Callable[..., UserCurrentLocation]) -> None:
        """Результат сохраняет исходный порядок."""
        locations = [
            make_location("a", 5, 0),
            make_location("b", 50, 0),
            make_location("c", 1, 100),
        ]

        result = filter_in_area(locations, _boundary(10, 0, -10, 10))

        assert [item.id for item in result] == ["a", "c"]

    def test_empty_input(self) -> None:
        """Пустой вход — пустой результат."""
        assert filter_in_area([], _boundary(10, 0, -10, 10)) == []


class TestRadius:
    """Тесты фильтра по радиусу."""

    def test_degree_distance(self) -> None:
        """Евклидово расстояние в градусах."""
        assert degree_distance(0, 0, 3, 4) == 5
        assert math.isclose(degree_distance(1, 1, 2, 2), math.sqrt(2))

    def test_same_point_radius_one(self, make_location: Callable[..., UserCurrentLocation]) -> None:
        """Расстояние 0 < 1 — точка включается."""
        assert is_near(make_location(latitude=0, longitude=0), 0, 0, 1) is True

    def test_same_point_radius_zero(self, make_location: Callable[..., UserCurrentLocation]) -> None:
        """Неравенство строгое: при радиусе 0 точка не включается."""
        assert is_near(make_location(latitude=0, longitude=0), 0, 0, 0) is False

    def test_distance_equal_to_radius_excluded(self, make_location: Callable[..., UserCurrentLocation]) -> None:
        """Точка ровно на окружности не включается."""
        assert is_near(make_location(latitude=3, longitude=4), 0, 0, 5) is False

    @pytest.mark.parametrize(
        ("latitude", "longitude", "expected"),
        [(0.5, 0.5, True), (2, 0, False), (0, -0.9, True)],
    )
    def test_filter_near(
        self,
        make_location: Callable[..., UserCurrentLocation],
        latitude: float,
        longitude: float,
        expected: bool,
    ) -> None:
        """Фильтр по радиусу 1 вокруг (0, 0)."""
        location = make_location(latitude=latitude, longitude=longitude)

        result = filter_near([location], 0, 0, 1)

        assert (result == [location]) is expected

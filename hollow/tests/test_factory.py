"""
Tests for creating stub instances
"""

from collections.abc import Container, Hashable, Iterable, Sized

import pytest

from hollow import get_instance_for, instance_of, stub_type_for
from hollow.cache import TypeCache
from hollow.core.errors import ContractError
from hollow.tests.contracts import Named, Point, Shape


def test_point_example():
    """Fresh instances read zero; setting x leaves y alone"""
    point = get_instance_for(Point, TypeCache())

    assert point is not None
    assert point.x == 0
    assert point.y == 0

    point.x = 5

    assert point.x == 5
    assert point.y == 0


@pytest.mark.parametrize("value", [0, -3, 42, 10 ** 20])
def test_property_round_trip(value):
    point = instance_of(Point, TypeCache())
    point.y = value
    assert point.y == value


def test_property_values_are_per_instance():
    cache = TypeCache()
    first = instance_of(Point, cache)
    second = instance_of(Point, cache)

    first.x = 7

    assert second.x == 0
    assert first._x == 7
    assert "_x" not in vars(second)


def test_same_contract_twice_shares_type_not_identity():
    cache = TypeCache()
    first = get_instance_for(Shape, cache)
    second = get_instance_for(Shape, cache)

    assert type(first) is type(second)
    assert first is not second


def test_instance_of_satisfies_contract():
    shape = instance_of(Shape, TypeCache())

    assert isinstance(shape, Shape)
    assert isinstance(shape, Named)
    assert shape.name == ""
    assert shape.area() == 0.0


def test_stub_type_for_uses_default_cache():
    assert stub_type_for(Point) is stub_type_for(Point)
    assert type(get_instance_for(Point)) is stub_type_for(Point).cls


def test_empty_cache_is_still_used():
    """An empty registry passed explicitly is not swapped for the default one"""
    cache = TypeCache()
    get_instance_for(Named, cache)
    assert Named in cache


def test_non_class_contract():
    with pytest.raises(ContractError):
        get_instance_for("Point")


def test_protocol_dunders_work_with_builtins():
    """Unannotated dunders return what len(), iter(), hash() and `in` require"""
    cache = TypeCache()
    sized = instance_of(Sized, cache)
    iterable = instance_of(Iterable, cache)
    container = instance_of(Container, cache)
    hashable = instance_of(Hashable, cache)

    assert len(sized) == 0
    assert list(iterable) == []
    assert list(iterable) == []
    assert "x" not in container
    assert hash(hashable) == 0
    assert stub_type_for(Sized, cache).find_method("__len__").default == 0

"""
Create empty instances of stub types.

Usage:
    class Point(Protocol):
        x: int
        y: int

    point = instance_of(Point)
    point.x = 5
    assert (point.x, point.y) == (5, 0)
"""

from typing import Optional, Type, TypeVar, cast

from .cache import TypeCache, default_cache
from .core.models import SynthesizedType

T = TypeVar("T")


def stub_type_for(contract: type, cache: Optional[TypeCache] = None) -> SynthesizedType:
    """Get the synthesized stub type for a contract, building it on first use."""
    registry = cache if cache is not None else default_cache
    return registry.get_or_create(contract)


def get_instance_for(contract: type, cache: Optional[TypeCache] = None) -> object:
    """
    Get a fresh, empty instance satisfying a contract.

    Args:
        contract: An abstract class or protocol
        cache: Registry to use (default: the process-wide registry)

    Returns:
        A new instance whose properties hold their type defaults
    """
    return stub_type_for(contract, cache).cls()


def instance_of(contract: Type[T], cache: Optional[TypeCache] = None) -> T:
    """Typed variant of get_instance_for."""
    return cast(T, get_instance_for(contract, cache))

"""
Default values for declared types.

Value types produce what their no-argument constructor returns; enums
produce their zero flag or first member; everything else is a reference
and defaults to None.
"""

import enum
import types
import typing
from typing import Any, Optional

from ..core.config import VALUE_TYPES
from ..core.errors import ConstructionError


def default_for(annotation: Any, member: Optional[str] = None) -> Any:
    """
    Resolve the default value for a declared type.

    Args:
        annotation: A type, typing construct, or unresolved string annotation
        member: Name of the member being stubbed, used in error messages

    Returns:
        The default value

    Raises:
        ConstructionError: If a value type cannot be built without arguments
    """
    if annotation is None or annotation is type(None) or annotation is typing.Any:
        return None

    # Forward references that could not be resolved are treated as references
    if isinstance(annotation, (str, typing.ForwardRef)):
        return None

    if isinstance(annotation, typing.NewType):
        return default_for(annotation.__supertype__, member)

    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        return default_for(typing.get_args(annotation)[0], member)
    if origin is typing.Literal:
        return typing.get_args(annotation)[0]
    if origin is typing.Union or origin is types.UnionType:
        return None
    if origin is not None:
        annotation = origin

    if not isinstance(annotation, type):
        return None
    if issubclass(annotation, enum.Enum):
        return _enum_default(annotation, member)
    if issubclass(annotation, VALUE_TYPES):
        return _construct(annotation, member)
    return None


def _enum_default(enum_type: typing.Type[enum.Enum], member: Optional[str]) -> Any:
    if issubclass(enum_type, enum.Flag):
        try:
            return enum_type(0)
        except ValueError:
            pass

    members = list(enum_type)
    if not members:
        raise ConstructionError(enum_type.__qualname__, member)
    return members[0]


def _construct(value_type: type, member: Optional[str]) -> Any:
    try:
        return value_type()
    except Exception as e:
        raise ConstructionError(value_type.__qualname__, member, e) from e

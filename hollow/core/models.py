"""
Data models for contracts and the stub types synthesized from them
"""

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .config import BACKING_FIELD_PREFIX


class MemberKind(str, Enum):
    """How a contract member is treated during synthesis"""
    GETTER = "getter"
    SETTER = "setter"
    METHOD = "method"


class Binding(str, Enum):
    """Which object a method is bound to when called"""
    INSTANCE = "instance"
    STATIC = "static"
    CLASS = "class"


@dataclass(frozen=True)
class MemberSignature:
    """One public member of a contract as reported by introspection"""
    name: str
    kind: MemberKind
    return_type: Any = None
    parameter_types: Tuple[Any, ...] = ()
    binding: Binding = Binding.INSTANCE
    is_async: bool = False
    signature: Optional[inspect.Signature] = None


@dataclass(frozen=True)
class ContractDescriptor:
    """The abstract class or protocol a caller wants an instance of"""
    name: str
    qualified_name: str
    contract: type
    members: Tuple[MemberSignature, ...]
    interfaces: Tuple["ContractDescriptor", ...] = ()

    def find_member(self, name: str) -> Optional[MemberSignature]:
        for sig in self.members:
            if sig.name == name:
                return sig
        return None


@dataclass
class PropertyDescriptor:
    """A readable and writable property backed by a private field"""
    name: str
    value_type: Any
    default: Any

    @property
    def backing_field(self) -> str:
        return BACKING_FIELD_PREFIX + self.name


@dataclass
class MethodStub:
    """A no-op override returning its return type's default value"""
    name: str
    return_type: Any
    default: Any
    binding: Binding = Binding.INSTANCE
    is_async: bool = False


@dataclass
class SynthesizedType:
    """
    A concrete class generated for a contract, plus what went into it.

    ``cls`` is the class itself; everything else records how it was built.
    """
    name: str
    qualified_name: str
    contract: type
    cls: type
    properties: List[PropertyDescriptor] = field(default_factory=list)
    methods: List[MethodStub] = field(default_factory=list)
    interfaces: List[type] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def backing_fields(self) -> Dict[str, Any]:
        return {prop.backing_field: prop.default for prop in self.properties}

    def find_property(self, name: str) -> Optional[PropertyDescriptor]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def find_method(self, name: str) -> Optional[MethodStub]:
        for stub in self.methods:
            if stub.name == name:
                return stub
        return None

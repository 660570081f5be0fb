"""
Build concrete stub classes from contract descriptors.

A stub class subclasses its contract. Each property the contract (or any
ancestor) declares becomes a readable and writable property over a private
backing field, and each ordinary method becomes an override that returns
the default value of its declared return type without running any logic.
"""

import inspect
import logging
import types
from typing import Any, Dict, List, Optional, Set, Tuple

from ..core.config import BACKING_FIELD_PREFIX, PROTOCOL_DEFAULTS, STUB_SUFFIX
from ..core.errors import ContractError
from ..core.models import (
    Binding,
    ContractDescriptor,
    MemberKind,
    MemberSignature,
    MethodStub,
    PropertyDescriptor,
    SynthesizedType,
)
from .defaults import default_for

logger = logging.getLogger(__name__)


class TypeSynthesizer:
    """Turns a ContractDescriptor into a SynthesizedType"""

    def __init__(self, suffix: str = STUB_SUFFIX):
        self.suffix = suffix

    def synthesize(self, descriptor: ContractDescriptor) -> SynthesizedType:
        """
        Build the stub class for a contract.

        Every default value is resolved here, so a value type that cannot be
        constructed fails the whole synthesis rather than a later call.

        Args:
            descriptor: The contract, with one descriptor per ancestor

        Returns:
            SynthesizedType wrapping the new class

        Raises:
            ConstructionError: If some member's default cannot be built
            ContractError: If the contract cannot be subclassed
        """
        contract = descriptor.contract
        name = descriptor.name + self.suffix
        qualname = contract.__qualname__ + self.suffix

        builder = _StubBuilder(qualname)
        builder.include(descriptor)
        for face in descriptor.interfaces:
            builder.include(face)

        namespace = builder.namespace
        namespace["__init__"] = _stub_init
        namespace["__module__"] = contract.__module__
        namespace["__qualname__"] = qualname
        namespace["__doc__"] = f"Stub implementation of {descriptor.qualified_name}."

        try:
            cls = types.new_class(name, (contract,), exec_body=lambda ns: ns.update(namespace))
        except TypeError as e:
            raise ContractError(contract, str(e)) from e

        if getattr(cls, "__abstractmethods__", None):
            missing = ", ".join(sorted(cls.__abstractmethods__))
            raise ContractError(contract, f"abstract members left unimplemented: {missing}")

        logger.debug("Built %s: %d properties, %d methods, %d skipped",
                     name, len(builder.properties), len(builder.methods), len(builder.skipped))

        return SynthesizedType(
            name=name,
            qualified_name=descriptor.qualified_name + self.suffix,
            contract=contract,
            cls=cls,
            properties=builder.properties,
            methods=builder.methods,
            interfaces=[contract] + [face.contract for face in descriptor.interfaces],
            skipped=builder.skipped,
        )


class _StubBuilder:
    """Accumulates the class namespace for one stub"""

    def __init__(self, qualname: str):
        self.qualname = qualname
        self.namespace: Dict[str, Any] = {}
        self.properties: List[PropertyDescriptor] = []
        self.methods: List[MethodStub] = []
        self.skipped: List[str] = []
        self._emitted: Set[str] = set()

    def include(self, descriptor: ContractDescriptor) -> None:
        """Stub one contract's own members; names already emitted win."""
        for member in descriptor.members:
            if member.name in self._emitted:
                continue
            self._emitted.add(member.name)

            if member.kind is MemberKind.SETTER:
                self._skip(descriptor, member)
            elif member.kind is MemberKind.GETTER:
                self._bind_property(member)
            else:
                self._bind_method(member)

    def _skip(self, descriptor: ContractDescriptor, member: MemberSignature) -> None:
        # Set-only properties are not supported; shadow them so the member is absent
        logger.debug("Skipping set-only property %s.%s", descriptor.name, member.name)
        self.namespace[member.name] = property(doc=f"{member.name} is not available on stubs")
        self.skipped.append(member.name)

    def _bind_property(self, member: MemberSignature) -> None:
        default = default_for(member.return_type, member.name)
        field = BACKING_FIELD_PREFIX + member.name

        def fget(instance):
            return getattr(instance, field)

        def fset(instance, value):
            setattr(instance, field, value)

        fget.__qualname__ = f"{self.qualname}.{member.name}"
        fset.__qualname__ = f"{self.qualname}.{member.name}"

        self.namespace[field] = default
        self.namespace[member.name] = property(fget, fset)
        self.properties.append(PropertyDescriptor(member.name, member.return_type, default))

    def _bind_method(self, member: MemberSignature) -> None:
        default = default_for(member.return_type, member.name)
        if default is None:
            default = PROTOCOL_DEFAULTS.get(member.name)
        stub = _make_stub(member.name, default, member.signature, member.is_async)
        stub.__qualname__ = f"{self.qualname}.{member.name}"

        if member.binding is Binding.STATIC:
            self.namespace[member.name] = staticmethod(stub)
        elif member.binding is Binding.CLASS:
            self.namespace[member.name] = classmethod(stub)
        else:
            self.namespace[member.name] = stub

        self.methods.append(MethodStub(
            name=member.name,
            return_type=member.return_type,
            default=default,
            binding=member.binding,
            is_async=member.is_async,
        ))


def _stub_init(self):
    pass


def _make_stub(name: str, default: Any, signature: Optional[inspect.Signature], is_async: bool):
    """
    Create a function that checks its call against the contract's signature
    and returns ``default``. Argument values are never inspected.
    """
    def check(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
        if signature is not None:
            signature.bind(*args, **kwargs)

    if is_async:
        async def stub(*args, **kwargs):
            check(args, kwargs)
            return default
    else:
        def stub(*args, **kwargs):
            check(args, kwargs)
            return default

    stub.__name__ = name
    stub.__doc__ = f"Stub for {name}; returns {default!r}."
    if signature is not None:
        stub.__signature__ = signature
    return stub

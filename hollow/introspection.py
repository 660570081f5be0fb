"""
Read a Python class into a ContractDescriptor.

Only the interpreter's own introspection (``inspect`` and ``typing``) is
consulted; nothing here changes the class being described.

An annotated class attribute is a property whether or not the body gives
it a value, so ``retries: int = 5`` reads 0 on a stub like any other int.
String annotations (including every annotation under
``from __future__ import annotations``) are evaluated one by one in the
declaring module; those naming something only imported for type checking
stay strings and default to None.
"""

import functools
import importlib
import inspect
import logging
import sys
import typing
from typing import Any, Dict, List, Optional, Tuple

from .core.config import IGNORED_MEMBERS, INFRASTRUCTURE_BASES
from .core.errors import ContractError, ContractResolutionError
from .core.models import Binding, ContractDescriptor, MemberKind, MemberSignature

logger = logging.getLogger(__name__)


def require_class(contract: Any) -> type:
    """Reject anything that is not a class before it reaches the registry."""
    if not inspect.isclass(contract):
        raise ContractError(contract, "not a class")
    return contract


def inspect_contract(contract: type) -> ContractDescriptor:
    """
    Describe a contract and, separately, every ancestor it conforms to.

    Args:
        contract: An abstract class or protocol

    Returns:
        ContractDescriptor whose ``interfaces`` hold one descriptor per
        ancestor in MRO order, each describing only its own members
    """
    require_class(contract)
    interfaces = tuple(
        _describe(base)
        for base in contract.__mro__[1:]
        if base not in INFRASTRUCTURE_BASES
    )
    return _describe(contract, interfaces)


def resolve_contract(reference: str) -> type:
    """
    Import the class named by 'package.module:Qual.Name'.

    The colon may be omitted ('package.module.Name'), in which case the last
    dotted segment is taken as the attribute.
    """
    if ":" in reference:
        module_name, _, qualname = reference.partition(":")
    else:
        module_name, _, qualname = reference.rpartition(".")
    if not module_name or not qualname:
        raise ContractResolutionError(reference, "expected 'module:QualName'")

    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise ContractResolutionError(reference, f"no module named '{module_name}'") from e

    for part in qualname.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ContractResolutionError(reference, f"no attribute '{part}'") from e
    return target


def _describe(cls: type, interfaces: Tuple[ContractDescriptor, ...] = ()) -> ContractDescriptor:
    members: List[MemberSignature] = []
    namespace = vars(cls)
    abstract = set(getattr(cls, "__abstractmethods__", ()))

    for name, raw in namespace.items():
        if name in IGNORED_MEMBERS:
            continue
        if name.startswith("_") and name not in abstract:
            continue
        member = _classify(cls, name, raw)
        if member is not None:
            members.append(member)

    # Annotated attributes become properties even when the body assigns them a value
    classified = {member.name for member in members}
    for name, annotation in _data_members(cls).items():
        if name in classified or name.startswith("_"):
            continue
        members.append(MemberSignature(name=name, kind=MemberKind.GETTER, return_type=annotation))

    return ContractDescriptor(
        name=cls.__name__,
        qualified_name=f"{cls.__module__}.{cls.__qualname__}",
        contract=cls,
        members=tuple(members),
        interfaces=interfaces,
    )


def _classify(owner: type, name: str, raw: Any) -> Optional[MemberSignature]:
    """Turn one class-body entry into a member, or None if it is not one."""
    if isinstance(raw, property):
        if raw.fget is None:
            if raw.fset is not None:
                return MemberSignature(name=name, kind=MemberKind.SETTER)
            return None
        return MemberSignature(
            name=name,
            kind=MemberKind.GETTER,
            return_type=_type_hints(owner, raw.fget).get("return", typing.Any),
        )

    if isinstance(raw, functools.cached_property):
        return MemberSignature(
            name=name,
            kind=MemberKind.GETTER,
            return_type=_type_hints(owner, raw.func).get("return", typing.Any),
        )

    if isinstance(raw, staticmethod):
        return _method(owner, name, raw.__func__, Binding.STATIC)
    if isinstance(raw, classmethod):
        return _method(owner, name, raw.__func__, Binding.CLASS)
    if inspect.isfunction(raw):
        return _method(owner, name, raw, Binding.INSTANCE)

    # Unannotated constants, nested classes and foreign descriptors are inherited as-is
    return None


def _method(owner: type, name: str, func: Any, binding: Binding) -> MemberSignature:
    hints = _type_hints(owner, func)
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        signature = None

    parameter_types: Tuple[Any, ...] = ()
    if signature is not None:
        params = list(signature.parameters.values())
        if binding is not Binding.STATIC and params:
            params = params[1:]
        parameter_types = tuple(hints.get(p.name, typing.Any) for p in params)

    return MemberSignature(
        name=name,
        kind=MemberKind.METHOD,
        return_type=hints.get("return", typing.Any),
        parameter_types=parameter_types,
        binding=binding,
        is_async=inspect.iscoroutinefunction(func),
        signature=signature,
    )


def _type_hints(owner: type, func: Any) -> Dict[str, Any]:
    """Parameter and return annotations of a function declared in ``owner``."""
    where = getattr(func, "__qualname__", repr(func))
    return _resolve_each(
        _raw_annotations(func, where),
        getattr(func, "__globals__", {}),
        vars(owner),
        where,
    )


def _data_members(cls: type) -> Dict[str, Any]:
    """Annotated instance attributes declared in the class body itself."""
    module = sys.modules.get(cls.__module__)
    annotations = _resolve_each(
        _raw_annotations(cls, cls.__qualname__),
        getattr(module, "__dict__", {}),
        vars(cls),
        cls.__qualname__,
    )
    return {
        name: annotation
        for name, annotation in annotations.items()
        if not _is_class_var(annotation)
    }


def _raw_annotations(obj: Any, where: str) -> Dict[str, Any]:
    try:
        return dict(inspect.get_annotations(obj))
    except NameError as e:
        # Lazily evaluated annotations naming something undefined
        logger.warning("Unreadable annotations on %s, ignoring them: %s", where, e)
        return {}


def _resolve_each(annotations: Dict[str, Any], globalns: Dict[str, Any],
                  localns: typing.Mapping[str, Any], where: str) -> Dict[str, Any]:
    """
    Evaluate string annotations one at a time.

    A name that cannot be evaluated stays a string (and so counts as a
    reference type) without affecting the annotations next to it.
    """
    resolved = {}
    for name, annotation in annotations.items():
        if isinstance(annotation, typing.ForwardRef):
            annotation = annotation.__forward_arg__
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, globalns, localns)
            except (NameError, AttributeError, SyntaxError, TypeError) as e:
                logger.warning("Unresolved annotation %r for '%s' on %s, treating it as a reference: %s",
                               annotation, name, where, e)
        resolved[name] = annotation
    return resolved


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar

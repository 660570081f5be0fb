"""
Hollow: run-time stub types for abstract classes and protocols
"""

import logging

from .cache import TypeCache, default_cache
from .core.errors import ConstructionError, ContractError, ContractResolutionError, HollowError
from .core.models import ContractDescriptor, PropertyDescriptor, MethodStub, SynthesizedType
from .factory import get_instance_for, instance_of, stub_type_for
from .introspection import inspect_contract, resolve_contract
from .synthesis import TypeSynthesizer, default_for
from .utils import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "get_instance_for",
    "instance_of",
    "stub_type_for",
    "TypeCache",
    "default_cache",
    "TypeSynthesizer",
    "default_for",
    "inspect_contract",
    "resolve_contract",
    "configure_logging",
    "ContractDescriptor",
    "PropertyDescriptor",
    "MethodStub",
    "SynthesizedType",
    "HollowError",
    "ContractError",
    "ConstructionError",
    "ContractResolutionError",
]

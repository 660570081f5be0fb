"""
Naming rules, default-value tables and environment settings
"""

import abc
import datetime
import decimal
import fractions
import typing

# Appended to a contract's name to name its stub class
STUB_SUFFIX = "Stub"

# Prefixed to a property name to name its backing field
BACKING_FIELD_PREFIX = "_"

# Types whose default value is whatever their no-argument constructor returns
VALUE_TYPES = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    tuple,
    frozenset,
    decimal.Decimal,
    fractions.Fraction,
    datetime.timedelta,
)

# Bases that carry no members of their own worth stubbing
INFRASTRUCTURE_BASES = (
    object,
    abc.ABC,
    typing.Protocol,
    typing.Generic,
)

# Class-body names that are never treated as contract members
IGNORED_MEMBERS = frozenset({
    "__abstractmethods__",
    "__annotations__",
    "__dict__",
    "__doc__",
    "__init__",
    "__module__",
    "__new__",
    "__parameters__",
    "__orig_bases__",
    "__qualname__",
    "__slots__",
    "__weakref__",
})

# Results of protocol dunders the interpreter type-checks, used when the
# declared return type would otherwise default to None. An empty iterator
# stays empty, so one is shared by every call
PROTOCOL_DEFAULTS = {
    "__bool__": False,
    "__contains__": False,
    "__float__": 0.0,
    "__hash__": 0,
    "__index__": 0,
    "__int__": 0,
    "__iter__": iter(()),
    "__len__": 0,
    "__length_hint__": 0,
    "__reversed__": iter(()),
}

# Fallbacks for the HOLLOW_LOG_LEVEL, HOLLOW_HOST and HOLLOW_PORT environment variables
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

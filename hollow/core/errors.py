"""
Exceptions raised while turning a contract into a stub
"""

from typing import Any, Optional


class HollowError(RuntimeError):
    """Base class for every error raised by hollow"""


class ContractError(HollowError):
    """The requested object cannot serve as a contract"""

    def __init__(self, contract: Any, reason: str):
        self.contract = contract
        self.reason = reason
        super().__init__(f"{contract!r} cannot be stubbed: {reason}")


class ConstructionError(HollowError):
    """A default value could not be built for a value-typed member"""

    def __init__(self, type_name: str, member: Optional[str] = None, cause: Optional[BaseException] = None):
        self.type_name = type_name
        self.member = member
        where = f" for member '{member}'" if member else ""
        message = f"cannot construct a default {type_name}{where}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class ContractResolutionError(HollowError):
    """A 'module:qualname' reference does not point at anything importable"""

    def __init__(self, reference: str, reason: str):
        self.reference = reference
        self.reason = reason
        super().__init__(f"cannot resolve '{reference}': {reason}")

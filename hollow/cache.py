"""
Process-wide registry of synthesized stub types.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from .core.models import SynthesizedType
from .introspection import inspect_contract, require_class
from .synthesis.synthesizer import TypeSynthesizer

logger = logging.getLogger(__name__)


class TypeCache:
    """
    Maps each contract class to the stub type synthesized for it.

    Lookup, synthesis and registration happen under one lock, so concurrent
    first requests for a contract still produce exactly one synthesis.
    Entries live as long as the cache does; there is no eviction.
    """

    def __init__(self, synthesizer: Optional[TypeSynthesizer] = None):
        """
        Args:
            synthesizer: Builds stub classes on a miss (default: TypeSynthesizer())
        """
        self.synthesizer = synthesizer or TypeSynthesizer()
        self._lock = threading.Lock()
        self._types: Dict[type, SynthesizedType] = {}
        self._stats = {
            "hits": 0,
            "misses": 0,
            "syntheses": 0,
            "failures": 0,
        }

    def get_or_create(self, contract: type) -> SynthesizedType:
        """
        Return the stub type for a contract, synthesizing it on first use.

        Args:
            contract: An abstract class or protocol

        Returns:
            The same SynthesizedType on every call for the same contract

        Raises:
            ContractError: If ``contract`` is not a usable class
            ConstructionError: If a member's default value cannot be built
        """
        require_class(contract)

        with self._lock:
            synthesized = self._types.get(contract)
            if synthesized is not None:
                self._stats["hits"] += 1
                logger.debug("Cache hit for %s", synthesized.qualified_name)
                return synthesized

            self._stats["misses"] += 1
            try:
                synthesized = self.synthesizer.synthesize(inspect_contract(contract))
            except Exception:
                self._stats["failures"] += 1
                raise

            self._types[contract] = synthesized
            self._stats["syntheses"] += 1
            logger.info("Synthesized %s for %s.%s", synthesized.name,
                        contract.__module__, contract.__qualname__)
            return synthesized

    def get(self, contract: type) -> Optional[SynthesizedType]:
        """Look up a contract without synthesizing it."""
        with self._lock:
            return self._types.get(contract)

    def list_types(self) -> List[SynthesizedType]:
        """All registered stub types, ordered by qualified name."""
        with self._lock:
            registered = list(self._types.values())
        return sorted(registered, key=lambda s: s.qualified_name)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get registry statistics.

        Returns:
            Dict with hits, misses, syntheses, failures and total_entries
        """
        with self._lock:
            stats = dict(self._stats)
            stats["total_entries"] = len(self._types)
        return stats

    def __contains__(self, contract: object) -> bool:
        with self._lock:
            return contract in self._types

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)


# Shared by every caller that does not bring its own cache
default_cache = TypeCache()

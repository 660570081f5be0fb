"""
Example: stub instances for a protocol and an abstract class
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Protocol

from hollow import configure_logging, instance_of, stub_type_for


class Point(Protocol):
    x: int
    y: int


class Repository(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    async def load(self, key: str) -> bytes:
        ...

    def save(self, key: str, payload: bytes) -> None:
        raise RuntimeError("never called on a stub")


if __name__ == "__main__":
    configure_logging("INFO")

    point = instance_of(Point)
    print(f"fresh point: x={point.x} y={point.y}")
    point.x = 5
    print(f"after x = 5: x={point.x} y={point.y}")

    repo = instance_of(Repository)
    repo.name = "users"
    repo.save("alice", b"...")
    print(f"{type(repo).__name__}: name={repo.name!r} count={repo.count()} "
          f"load={asyncio.run(repo.load('alice'))!r}")

    stub = stub_type_for(Repository)
    print(f"properties: {[p.name for p in stub.properties]}")
    print(f"methods:    {[m.name for m in stub.methods]}")

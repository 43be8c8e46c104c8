from __future__ import annotations

from dataclasses import dataclass

from core.domain.identifiers import generate_id


@dataclass
class Customer:
    id: str
    name: str

    @staticmethod
    def create(name: str) -> "Customer":
        return Customer(id=generate_id(), name=name)


__all__ = ["Customer"]

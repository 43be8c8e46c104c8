from __future__ import annotations

from dataclasses import dataclass

from core.domain.enums import ResourceStatus
from core.domain.identifiers import generate_id


@dataclass
class Resource:
    id: str
    name: str
    email: str = ""
    per_hour_rate: float = 0.0
    currency: str = "USD"
    status: ResourceStatus = ResourceStatus.ACTIVE

    @staticmethod
    def create(
        name: str,
        per_hour_rate: float = 0.0,
        email: str = "",
        currency: str = "USD",
        status: ResourceStatus = ResourceStatus.ACTIVE,
    ) -> "Resource":
        return Resource(
            id=generate_id(),
            name=name,
            email=email,
            per_hour_rate=per_hour_rate,
            currency=currency,
            status=status,
        )


__all__ = ["Resource"]

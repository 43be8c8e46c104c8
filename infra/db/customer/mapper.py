from __future__ import annotations

from core.models import Customer, Reference, Resolved, Unresolved
from infra.db.models import CustomerORM


def customer_to_orm(customer: Customer) -> CustomerORM:
    return CustomerORM(id=customer.id, name=customer.name, is_deleted=False)


def customer_from_orm(obj: CustomerORM) -> Customer:
    return Customer(id=obj.id, name=obj.name)


def customer_reference(customer_id: str | None, obj: CustomerORM | None) -> Reference[Customer]:
    if obj is None or obj.is_deleted:
        return Unresolved(customer_id)
    return Resolved(customer_from_orm(obj))


__all__ = ["customer_to_orm", "customer_from_orm", "customer_reference"]

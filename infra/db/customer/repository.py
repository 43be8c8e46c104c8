from __future__ import annotations

from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from core.interfaces import CustomerRepository
from core.models import Customer
from infra.db.customer.mapper import customer_from_orm, customer_to_orm
from infra.db.models import CustomerORM


class SqlAlchemyCustomerRepository(CustomerRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, customer: Customer) -> None:
        self.session.add(customer_to_orm(customer))

    def delete(self, customer_id: str) -> None:
        self.session.execute(
            update(CustomerORM).where(CustomerORM.id == customer_id).values(is_deleted=True)
        )

    def get(self, customer_id: str) -> Optional[Customer]:
        obj = self.session.get(CustomerORM, customer_id)
        return customer_from_orm(obj) if obj and not obj.is_deleted else None


__all__ = ["SqlAlchemyCustomerRepository"]

from infra.db.customer.mapper import customer_from_orm, customer_reference, customer_to_orm
from infra.db.customer.repository import SqlAlchemyCustomerRepository

__all__ = [
    "customer_to_orm",
    "customer_from_orm",
    "customer_reference",
    "SqlAlchemyCustomerRepository",
]

"""Customer repository."""
from sqlalchemy.orm import Session
from typing import Optional, List

from studio.repositories.base import BaseRepository
from studio.models.customer import Customer
from studio.schemas.customer import CustomerCreate, CustomerUpdate


class CustomerRepository(BaseRepository[Customer]):
    """Repository for customer records."""

    def __init__(self, db: Session):
        super().__init__(Customer, db)

    def create_customer(self, customer_data: CustomerCreate) -> Customer:
        return self.create(customer_data.model_dump())

    def list_customers(self) -> List[Customer]:
        """All customers, newest first."""
        customers, _ = self.get_multi()
        return customers

    def update_customer(self, customer_id: int, customer_data: CustomerUpdate) -> Optional[Customer]:
        update_dict = customer_data.model_dump(exclude_unset=True)
        if update_dict.get('name') is None:
            update_dict.pop('name', None)
        if 'notes' in update_dict and update_dict['notes'] is None:
            update_dict['notes'] = ''
        return self.update(customer_id, update_dict)

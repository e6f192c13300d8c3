"""Customer API endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from studio.api.deps import get_db
from studio.repositories.booking_repo import BookingRepository
from studio.repositories.customer_repo import CustomerRepository
from studio.schemas.booking import BookingResponse
from studio.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse

router = APIRouter()


def customer_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Customer not found')


@router.get('', response_model=list[CustomerResponse])
def list_customers(db: Session = Depends(get_db)):
    """List customers, newest first."""
    return CustomerRepository(db).list_customers()


@router.post('', response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(customer_data: CustomerCreate, db: Session = Depends(get_db)):
    return CustomerRepository(db).create_customer(customer_data)


@router.get('/{customer_id}', response_model=CustomerResponse)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    customer = CustomerRepository(db).get(customer_id)
    if not customer:
        raise customer_not_found()
    return customer


@router.put('/{customer_id}', response_model=CustomerResponse)
def update_customer(customer_id: int, customer_data: CustomerUpdate, db: Session = Depends(get_db)):
    customer = CustomerRepository(db).update_customer(customer_id, customer_data)
    if not customer:
        raise customer_not_found()
    return customer


@router.delete('/{customer_id}', response_model=dict)
def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    """
    Delete a customer and their bookings.

    Albums linked to the customer are kept and lose the link.
    """
    if not CustomerRepository(db).delete(customer_id):
        raise customer_not_found()
    return {'message': 'Customer deleted successfully'}


@router.get('/{customer_id}/bookings', response_model=list[BookingResponse])
def list_customer_bookings(customer_id: int, db: Session = Depends(get_db)):
    """List one customer's bookings, newest first."""
    if not CustomerRepository(db).exists(customer_id):
        raise customer_not_found()
    return BookingRepository(db).list_for_customer(customer_id)

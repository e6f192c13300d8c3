#!/usr/bin/env python
"""Seed the database with sample customers, albums and an inquiry."""
from datetime import date, timedelta

from sqlalchemy.orm import Session

from studio.app.config import get_settings
from studio.db.base import build_engine, build_session_factory, init_db
from studio.models import Album, Customer
from studio.repositories import (
    AlbumRepository,
    BookingRepository,
    CustomerRepository,
    InquiryRepository,
)
from studio.schemas import AlbumCreate, BookingCreate, CustomerCreate, InquiryCreate


def seed_customers(db: Session):
    """Create sample customers with one booking each."""
    customers = [
        CustomerCreate(name="Asha Verma", email="asha@example.com", phone="+919876543210"),
        CustomerCreate(name="Rahul Mehta", email="rahul@example.com", notes="Prefers evening shoots"),
    ]

    repo = CustomerRepository(db)
    bookings = BookingRepository(db)
    for offset, customer_data in enumerate(customers):
        existing = db.query(Customer).filter(Customer.email == customer_data.email).first()
        if existing:
            continue
        customer = repo.create_customer(customer_data)
        bookings.create_booking(BookingCreate(
            customer_id=customer.id,
            details="Half-day session",
            amount=15000,
            booking_date=date.today() + timedelta(days=7 * (offset + 1)),
        ))
        print(f"  → Created customer: {customer.email}")

    print("✅ Created sample customers")


def seed_albums(db: Session):
    """Create one public and one private album."""
    customer = db.query(Customer).order_by(Customer.id).first()
    albums = [
        AlbumCreate(name="Monsoon Portraits", category="portrait"),
        AlbumCreate(
            name="Verma Wedding",
            category="wedding",
            is_private=True,
            passphrase="marigold",
            customer_id=customer.id if customer else None,
        ),
    ]

    repo = AlbumRepository(db, token_length=get_settings().ACCESS_TOKEN_LENGTH)
    for album_data in albums:
        existing = db.query(Album).filter(Album.name == album_data.name).first()
        if existing:
            continue
        album = repo.create_album(album_data)
        if album.is_private:
            print(f"  → Created album: {album.name} (token: {album.access_token})")
        else:
            print(f"  → Created album: {album.name}")

    print("✅ Created sample albums")


def seed_inquiries(db: Session):
    repo = InquiryRepository(db)
    if repo.count():
        return
    repo.create_inquiry(InquiryCreate(
        name="Neha Kapoor",
        email="neha@example.com",
        type="booking",
        service="maternity",
        message="Are weekend slots available next month?",
    ))
    print("✅ Created sample inquiry")


if __name__ == "__main__":
    print("🌱 Seeding database...")
    print("=" * 50)

    settings = get_settings()
    engine = build_engine(settings.SQLALCHEMY_DATABASE_URL)
    init_db(engine)
    db = build_session_factory(engine)()
    try:
        seed_customers(db)
        seed_albums(db)
        seed_inquiries(db)
        print("=" * 50)
        print("✅ Database seeded successfully!")
    except Exception as e:
        print(f"❌ Error seeding database: {e}")
        import traceback
        traceback.print_exc()
    finally:
        db.close()
        engine.dispose()

from datetime import date

from studio.models import Album, Booking, Customer, Image, Inquiry


def test_create_customer(db_session):
    """Test customer creation."""
    customer = Customer(name="Asha Verma", email="asha@example.com", phone="+919876543210")
    db_session.add(customer)
    db_session.commit()

    assert customer.id is not None
    assert customer.notes == ""
    assert customer.created_at is not None


def test_create_album(db_session):
    """Test album creation."""
    album = Album(name="Wedding Album", category="wedding")
    db_session.add(album)
    db_session.commit()

    assert album.id is not None
    assert album.is_private is False
    assert album.passphrase is None
    assert album.access_token is None


def test_create_image(db_session):
    """Test image creation."""
    album = Album(name="Portraits", category="portrait")
    db_session.add(album)
    db_session.commit()

    image = Image(album_id=album.id, url="/uploads/images-1-1.jpg")
    db_session.add(image)
    db_session.commit()

    assert image.order_index == 0
    assert image.is_selected is False
    assert image.feedback is None


def test_deleting_album_removes_its_images(db_session):
    album = Album(name="Portraits", category="portrait")
    db_session.add(album)
    db_session.commit()
    db_session.add_all([
        Image(album_id=album.id, url="/uploads/a.jpg", order_index=0),
        Image(album_id=album.id, url="/uploads/b.jpg", order_index=1),
    ])
    db_session.commit()

    db_session.delete(album)
    db_session.commit()

    assert db_session.query(Image).count() == 0


def test_deleting_customer_unlinks_albums_and_drops_bookings(db_session):
    customer = Customer(name="Rahul Mehta")
    db_session.add(customer)
    db_session.commit()

    album = Album(name="Mehta Wedding", category="wedding", customer_id=customer.id)
    booking = Booking(customer_id=customer.id, details="Full day", amount=25000.0, booking_date=date(2026, 12, 1))
    db_session.add_all([album, booking])
    db_session.commit()
    album_id = album.id

    db_session.delete(customer)
    db_session.commit()
    db_session.expire_all()

    kept = db_session.get(Album, album_id)
    assert kept is not None
    assert kept.customer_id is None
    assert db_session.query(Booking).count() == 0


def test_create_inquiry(db_session):
    inquiry = Inquiry(
        name="Neha",
        email="neha@example.com",
        type="booking",
        service="maternity",
        message="Weekend slots?",
        timestamp="2026-10-19T10:00:00Z",
    )
    db_session.add(inquiry)
    db_session.commit()

    assert inquiry.read is False

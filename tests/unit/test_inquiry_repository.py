import pytest

from studio.repositories.inquiry_repo import InquiryRepository
from studio.schemas.inquiry import InquiryCreate


@pytest.fixture
def inquiries(db_session):
    return InquiryRepository(db_session)


def make_inquiry(**overrides):
    data = {
        "name": "Neha Kapoor",
        "email": "neha@example.com",
        "type": "booking",
        "service": "maternity",
        "message": "Are weekend slots available?",
    }
    data.update(overrides)
    return InquiryCreate(**data)


def test_create_inquiry_defaults(inquiries):
    inquiry = inquiries.create_inquiry(make_inquiry())

    assert inquiry.read is False
    assert inquiry.phone == ""
    assert inquiry.timestamp


def test_client_timestamp_is_kept(inquiries):
    inquiry = inquiries.create_inquiry(make_inquiry(timestamp="2026-10-19T09:30:00.000Z"))

    assert inquiry.timestamp == "2026-10-19T09:30:00.000Z"


def test_required_fields():
    with pytest.raises(ValueError):
        make_inquiry(message="   ")


def test_mark_read_is_idempotent(inquiries):
    inquiry = inquiries.create_inquiry(make_inquiry())

    assert inquiries.mark_read(inquiry.id).read is True
    assert inquiries.mark_read(inquiry.id).read is True
    assert inquiries.mark_read(999) is None


def test_list_unread_only(inquiries):
    first = inquiries.create_inquiry(make_inquiry(name="First"))
    second = inquiries.create_inquiry(make_inquiry(name="Second"))
    inquiries.mark_read(first.id)

    assert [i.id for i in inquiries.list_inquiries(unread_only=True)] == [second.id]
    assert {i.id for i in inquiries.list_inquiries()} == {first.id, second.id}

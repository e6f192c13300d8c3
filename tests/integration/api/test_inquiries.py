import pytest


INQUIRY = {
    "name": "Neha Kapoor",
    "email": "neha@example.com",
    "phone": "+919812345678",
    "type": "booking",
    "service": "maternity",
    "message": "Are weekend slots available next month?",
    "timestamp": "2026-10-19T09:30:00.000Z",
}


@pytest.mark.integration
def test_submit_inquiry(client):
    response = client.post("/api/inquiries", json=INQUIRY)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Inquiry submitted successfully"

    listed = client.get("/api/inquiries").json()
    assert listed[0]["id"] == body["id"]
    assert listed[0]["read"] is False
    assert listed[0]["timestamp"] == INQUIRY["timestamp"]


@pytest.mark.integration
@pytest.mark.parametrize("field", ["name", "email", "type", "service", "message"])
def test_required_fields(client, field):
    payload = {key: value for key, value in INQUIRY.items() if key != field}

    response = client.post("/api/inquiries", json=payload)

    assert response.status_code == 400
    assert field in response.json()["error"]


@pytest.mark.integration
def test_mark_read(client):
    inquiry_id = client.post("/api/inquiries", json=INQUIRY).json()["id"]

    for _ in range(2):
        response = client.patch(f"/api/inquiries/{inquiry_id}/read")
        assert response.status_code == 200
        assert response.json() == {"message": "Inquiry marked as read"}

    assert client.get("/api/inquiries", params={"unread_only": True}).json() == []
    assert client.patch("/api/inquiries/999/read").status_code == 404


@pytest.mark.integration
def test_delete_inquiry(client):
    inquiry_id = client.post("/api/inquiries", json=INQUIRY).json()["id"]

    assert client.delete(f"/api/inquiries/{inquiry_id}").status_code == 200
    assert client.get("/api/inquiries").json() == []


@pytest.mark.integration
def test_long_client_timestamp_is_kept(client):
    timestamp = "Sunday, 19 October 2026 09:30:00 GMT+0530 (India Standard Time) via contact widget"
    assert len(timestamp) > 64

    response = client.post("/api/inquiries", json={**INQUIRY, "timestamp": timestamp})

    assert response.status_code == 201
    assert client.get("/api/inquiries").json()[0]["timestamp"] == timestamp

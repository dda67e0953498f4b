from social_platform.social_platform.social_service.models import Message


def test_create_message(client, create_user, auth_header_for, db_session):
    sender = create_user()
    receiver = create_user()

    response = client.post(
        f"/api/user/{receiver['id']}/create-message",
        headers=auth_header_for(sender),
        json={"message": "hello"},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Message sent"}

    messages = db_session.query(Message).all()
    assert len(messages) == 1
    message = messages[0]
    assert message.content == "hello"
    assert message.sender_id == sender["id"]
    assert message.receiver_id == receiver["id"]
    assert message.created_at is not None
    assert message.sender.username == sender["username"]


def test_create_message_to_missing_user(client, create_user, auth_header_for, db_session):
    sender = create_user()

    response = client.post(
        "/api/user/9999/create-message",
        headers=auth_header_for(sender),
        json={"message": "hello"},
    )
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}
    assert db_session.query(Message).count() == 0


def test_create_message_from_missing_sender(client, create_user, auth_header_for, db_session):
    receiver = create_user()

    response = client.post(
        f"/api/user/{receiver['id']}/create-message",
        headers=auth_header_for({"id": 5555, "username": "gone"}),
        json={"message": "hello"},
    )
    assert response.status_code == 404
    assert db_session.query(Message).count() == 0


def test_create_message_requires_body(client, create_user, auth_header_for):
    sender = create_user()
    receiver = create_user()

    response = client.post(
        f"/api/user/{receiver['id']}/create-message",
        headers=auth_header_for(sender),
        json={},
    )
    assert response.status_code == 422


def test_create_message_requires_auth(client, create_user):
    receiver = create_user()

    response = client.post(f"/api/user/{receiver['id']}/create-message", json={"message": "hi"})
    assert response.status_code == 401


def test_messages_to_self_are_allowed(client, create_user, auth_header_for, db_session):
    user = create_user()

    response = client.post(
        f"/api/user/{user['id']}/create-message",
        headers=auth_header_for(user),
        json={"message": "note to self"},
    )
    assert response.status_code == 200
    assert db_session.query(Message).filter(Message.receiver_id == user["id"]).count() == 1

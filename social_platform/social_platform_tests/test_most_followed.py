def test_most_followed_orders_by_followers_desc(client, create_user):
    less = create_user(username="fifty", followers_count=50)
    more = create_user(username="hundred", followers_count=100)
    none = create_user(username="zero", followers_count=0)

    response = client.get("/api/most-followed")
    assert response.status_code == 200
    assert response.json() == [
        {"id": more["id"], "username": "hundred", "followersCount": 100},
        {"id": less["id"], "username": "fifty", "followersCount": 50},
        {"id": none["id"], "username": "zero", "followersCount": 0},
    ]


def test_most_followed_empty(client):
    response = client.get("/api/most-followed")
    assert response.status_code == 200
    assert response.json() == []


def test_most_followed_tracks_follows(client, create_user, auth_header_for):
    alice = create_user(username="alice")
    bob = create_user(username="bob")
    carol = create_user(username="carol")

    client.post(f"/api/user/{bob['id']}/follow", headers=auth_header_for(alice))
    client.post(f"/api/user/{bob['id']}/follow", headers=auth_header_for(carol))
    client.post(f"/api/user/{carol['id']}/follow", headers=auth_header_for(alice))

    ranking = client.get("/api/most-followed").json()
    assert [entry["username"] for entry in ranking] == ["bob", "carol", "alice"]
    assert [entry["followersCount"] for entry in ranking] == [2, 1, 0]

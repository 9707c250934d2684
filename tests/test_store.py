def test_list_events(client):
    events = client.get("/api/store/events").get_json()
    assert len(events) == 5
    assert all(isinstance(e["date"], str) for e in events)


def test_filter_events(client):
    by_city = client.get("/api/store/events?city=sao").get_json()
    assert [e["id"] for e in by_city] == ["ev1"]

    workshops = client.get("/api/store/events?type=Workshop").get_json()
    assert [e["id"] for e in workshops] == ["ev3"]


def test_event_detail(client):
    event = client.get("/api/store/events/ev1").get_json()
    assert event["date"] == "2025-02-15"
    assert event["bricks_price"] < event["normal_price"]
    assert client.get("/api/store/events/ev99").status_code == 404


def test_products(client):
    assert len(client.get("/api/store/products").get_json()) == 6
    equipment = client.get("/api/store/products?category=Equipment").get_json()
    assert {p["id"] for p in equipment} == {"prod4", "prod5"}
    assert client.get("/api/store/products/prod1").get_json()["category"] == "Supplements"
    assert client.get("/api/store/products/nope").status_code == 404

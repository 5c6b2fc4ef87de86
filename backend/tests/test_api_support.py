from recovery.core.constants import CRISIS_HOTLINES, DEFAULT_COPING_STRATEGIES


def test_strategy_library_is_provisioned_once(client):
    r = client.get("/strategies/")
    assert r.status_code == 200, r.text
    library = r.json()
    assert len(library) == len(DEFAULT_COPING_STRATEGIES)
    assert all(not s["is_custom"] and s["usage_count"] == 0 for s in library)
    keys = [(s["category"], s["title"]) for s in library]
    assert keys == sorted(keys)

    assert len(client.get("/strategies/").json()) == len(library)


def test_strategy_category_filter(client):
    r = client.get("/strategies/", params={"category": "Breathing"})
    assert [s["title"] for s in r.json()] == ["4-7-8 Breathing", "Box Breathing"]

    r = client.get("/strategies/", params={"category": "All"})
    assert len(r.json()) == len(DEFAULT_COPING_STRATEGIES)

    assert client.get("/strategies/", params={"category": "Juggling"}).status_code == 422


def test_custom_strategy_lifecycle(client):
    r = client.post("/strategies/", json={"title": "  Call my sister ", "description": "She always picks up"})
    assert r.status_code == 200, r.text
    custom = r.json()
    assert custom["title"] == "Call my sister"
    assert custom["category"] == "Custom"
    assert custom["is_custom"] is True

    # built-in ones are listed first
    assert client.get("/strategies/").json()[-1]["id"] == custom["id"]

    r = client.post("/strategies/", json={"title": "Call my sister"})
    assert r.status_code == 409

    assert client.post("/strategies/", json={"title": "x", "category": "Juggling"}).status_code == 422

    assert client.delete(f"/strategies/{custom['id']}").status_code == 200
    assert all(s["is_custom"] is False for s in client.get("/strategies/").json())


def test_using_and_rating_a_strategy(client):
    strategy = client.get("/strategies/").json()[0]
    assert strategy["last_used"] is None

    client.post(f"/strategies/{strategy['id']}/use")
    r = client.post(f"/strategies/{strategy['id']}/use")
    assert r.status_code == 200, r.text
    assert r.json()["usage_count"] == 2
    assert r.json()["last_used"] is not None

    r = client.put(f"/strategies/{strategy['id']}/rating", json={"rating": 4})
    assert r.json()["effectiveness_rating"] == 4
    assert client.put(f"/strategies/{strategy['id']}/rating", json={"rating": 6}).status_code == 422


def test_strategies_are_private_per_user(client):
    strategy = client.get("/strategies/").json()[0]
    other = {"X-User-Id": "user-2"}

    assert client.post(f"/strategies/{strategy['id']}/use", headers=other).status_code == 404
    their_copy = client.get("/strategies/", headers=other).json()
    assert strategy["id"] not in {s["id"] for s in their_copy}
    assert all(s["usage_count"] == 0 for s in their_copy)


def test_built_in_strategy_cannot_be_deleted(client):
    strategy = client.get("/strategies/").json()[0]
    assert client.delete(f"/strategies/{strategy['id']}").status_code == 403


def test_emergency_contacts_ordered_by_priority(client):
    r = client.post("/contacts/", json={
        "name": "Dana", "phone": "555-123-4567", "relationship": "Sponsor", "priority_level": 2,
    })
    assert r.status_code == 200, r.text
    dana = r.json()
    assert dana["priority_label"] == "High"
    assert dana["display_phone"] == "(555) 123-4567"
    assert dana["dial_number"] == "5551234567"

    client.post("/contacts/", json={"name": "Dr. Lee", "phone": "+1 (555) 987 6543", "relationship": "Doctor", "priority_level": 4})
    client.post("/contacts/", json={"name": "Mom", "phone": "5550001111", "relationship": "Family Member"})

    names = [c["name"] for c in client.get("/contacts/").json()]
    assert names == ["Mom", "Dana", "Dr. Lee"]


def test_emergency_contact_validation(client):
    assert client.post("/contacts/", json={"name": "Short", "phone": "911"}).status_code == 422
    assert client.post("/contacts/", json={"name": "Pal", "phone": "5551234567", "relationship": "Neighbour"}).status_code == 422
    assert client.post("/contacts/", json={"name": "Pal", "phone": "5551234567", "priority_level": 6}).status_code == 422

    r = client.post("/contacts/", json={"name": "Pal", "phone": "5551234567", "relationship": ""})
    assert r.status_code == 200
    assert r.json()["relationship"] is None
    assert r.json()["priority_level"] == 1


def test_emergency_contact_update_and_delete(client):
    contact = client.post("/contacts/", json={"name": "Sam", "phone": "5551234567"}).json()

    r = client.put(f"/contacts/{contact['id']}", json={"priority_level": 5, "relationship": "Mentor"})
    assert r.status_code == 200, r.text
    assert r.json()["priority_label"] == "Reference"
    assert r.json()["relationship"] == "Mentor"
    assert r.json()["name"] == "Sam"

    assert client.put(f"/contacts/{contact['id']}", json={"name": None}).status_code == 422
    assert client.put(f"/contacts/{contact['id']}", json={"phone": "12"}).status_code == 422

    other = {"X-User-Id": "user-2"}
    assert client.delete(f"/contacts/{contact['id']}", headers=other).status_code == 404
    assert client.delete(f"/contacts/{contact['id']}").status_code == 200
    assert client.get("/contacts/").json() == []


def test_crisis_hotlines(client):
    r = client.get("/contacts/hotlines")
    assert r.status_code == 200
    assert r.json() == CRISIS_HOTLINES
    assert r.json()[0]["number"] == "988"

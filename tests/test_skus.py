def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_create_sku_returns_id(client):
    resp = client.post("/api/skus", json={
        "name": "Energy Tablet",
        "flavor": "Berry",
        "strength_mg": 250,
        "target_tablet_weight": 0.8,
    })

    assert resp.status_code == 201
    assert resp.json() == {"id": 1}

    skus = client.get("/api/skus").json()
    assert len(skus) == 1
    assert skus[0]["name"] == "Energy Tablet"
    assert skus[0]["flavor"] == "Berry"
    assert skus[0]["strength_mg"] == 250
    assert skus[0]["target_tablet_weight"] == 0.8
    assert skus[0]["created_at"]


def test_optional_fields_default_to_null(client):
    client.post("/api/skus", json={"name": "Plain"})

    sku = client.get("/api/skus").json()[0]
    assert sku["flavor"] is None
    assert sku["strength_mg"] is None
    assert sku["target_tablet_weight"] is None


def test_name_is_required(client):
    missing = client.post("/api/skus", json={"flavor": "Lemon"})
    blank = client.post("/api/skus", json={"name": "   "})

    assert missing.status_code == 400
    assert "name" in missing.json()["detail"]
    assert blank.status_code == 400
    assert client.get("/api/skus").json() == []


def test_list_is_newest_first(client):
    for name in ("A", "B", "C"):
        client.post("/api/skus", json={"name": name})

    skus = client.get("/api/skus").json()

    assert [s["name"] for s in skus] == ["C", "B", "A"]
    assert [s["id"] for s in skus] == [3, 2, 1]

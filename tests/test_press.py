from datetime import datetime, timedelta

import pytest

from models.press_run import PressRun


@pytest.fixture()
def batch_id(client, sku_with_recipe):
    return client.post("/api/batches", json={"sku_id": sku_with_recipe.id, "planned_weight": 100}).json()["id"]


def test_create_press_run_computes_expected_count(client, batch_id):
    resp = client.post("/api/press", json={"batch_id": batch_id, "received_weight": 50, "tablet_weight": 0.8})

    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "expected_tablet_count": 62}

    run = client.get("/api/press").json()[0]
    assert run["batch_id"] == batch_id
    assert run["received_weight"] == 50
    assert run["tablet_weight"] == 0.8
    assert run["expected_tablet_count"] == 62
    assert run["final_weight"] is None
    assert run["loss_weight"] is None


@pytest.mark.parametrize("payload", [
    {},
    {"received_weight": 50},
    {"tablet_weight": 0.8},
    {"received_weight": 50, "tablet_weight": 0},
    {"received_weight": None, "tablet_weight": 0.8},
])
def test_expected_count_is_null_without_usable_weights(client, batch_id, payload):
    resp = client.post("/api/press", json={"batch_id": batch_id, **payload})

    assert resp.status_code == 201
    assert resp.json()["expected_tablet_count"] is None


def test_batch_id_is_required(client, db_session):
    assert client.post("/api/press", json={"received_weight": 50, "tablet_weight": 1}).status_code == 400
    assert client.post("/api/press", json={"batch_id": 0}).status_code == 400
    assert db_session.query(PressRun).count() == 0


def test_list_is_newest_first(client, db_session, batch_id):
    for received in (10, 20, 30):
        client.post("/api/press", json={"batch_id": batch_id, "received_weight": received, "tablet_weight": 1})
    oldest = db_session.query(PressRun).filter(PressRun.id == 3).first()
    oldest.created_at = datetime.now() - timedelta(days=1)
    db_session.commit()

    runs = client.get("/api/press").json()
    created = [datetime.fromisoformat(r["created_at"]) for r in runs]

    assert [r["id"] for r in runs] == [2, 1, 3]
    assert all(a >= b for a, b in zip(created, created[1:]))


def test_complete_records_final_and_loss(client, batch_id):
    run_id = client.post("/api/press", json={"batch_id": batch_id, "received_weight": 50, "tablet_weight": 0.8}).json()["id"]

    resp = client.patch(f"/api/press/{run_id}/complete", json={"final_weight": 49.5, "loss_weight": 0.5})

    assert resp.status_code == 200
    assert resp.json() == {"updated": 1}
    run = client.get("/api/press").json()[0]
    assert run["final_weight"] == 49.5
    assert run["loss_weight"] == 0.5
    assert run["expected_tablet_count"] == 62


def test_complete_preserves_omitted_fields(client, batch_id):
    run_id = client.post("/api/press", json={"batch_id": batch_id}).json()["id"]
    client.patch(f"/api/press/{run_id}/complete", json={"final_weight": 49.5, "loss_weight": 0.5})

    client.patch(f"/api/press/{run_id}/complete", json={"loss_weight": 0.7})
    run = client.get("/api/press").json()[0]
    assert run["final_weight"] == 49.5
    assert run["loss_weight"] == 0.7

    client.patch(f"/api/press/{run_id}/complete", json={"final_weight": None})
    run = client.get("/api/press").json()[0]
    assert run["final_weight"] is None
    assert run["loss_weight"] == 0.7


def test_complete_without_body(client, batch_id):
    run_id = client.post("/api/press", json={"batch_id": batch_id}).json()["id"]

    resp = client.patch(f"/api/press/{run_id}/complete")

    assert resp.status_code == 200
    assert resp.json() == {"updated": 1}


def test_complete_unknown_press_run(client):
    resp = client.patch("/api/press/5/complete", json={"final_weight": 1})

    assert resp.status_code == 404
    assert resp.json() == {"detail": "press run not found"}


@pytest.mark.parametrize("received, tablet", [(1e300, 1e-300), (1e20, 1)])
def test_expected_count_is_null_when_too_large(client, db_session, batch_id, received, tablet):
    resp = client.post("/api/press", json={"batch_id": batch_id, "received_weight": received, "tablet_weight": tablet})

    assert resp.status_code == 201
    run = db_session.query(PressRun).filter(PressRun.id == resp.json()["id"]).one()
    assert run.expected_tablet_count is None
    assert run.received_weight == received


def test_non_finite_weights_are_rejected(client, db_session, batch_id):
    resp = client.post(
        "/api/press",
        content='{"batch_id": %d, "received_weight": Infinity, "tablet_weight": 0.8}' % batch_id,
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert "received_weight" in resp.json()["errors"]
    assert db_session.query(PressRun).count() == 0

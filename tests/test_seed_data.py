from crud.recipe import get_current_recipe, get_recipe_items
from models.sku import Sku
from seed_data import seed_sample_data


def test_seeds_empty_catalog(db_session):
    assert seed_sample_data(db_session) is True

    sku = db_session.query(Sku).one()
    assert sku.name == "Sample Energy Tablet"
    assert sku.target_tablet_weight == 0.8
    recipe = get_current_recipe(db_session, sku.id)
    items = get_recipe_items(db_session, recipe.id)
    assert [(i.material, i.target_weight, i.unit) for i in items] == [
        ("Active Powder", 10, "kg"),
        ("Binder", 2, "kg"),
        ("Flavor", 0.5, "kg"),
    ]


def test_does_not_seed_twice(db_session):
    seed_sample_data(db_session)

    assert seed_sample_data(db_session) is False
    assert db_session.query(Sku).count() == 1


def test_seeded_sku_can_start_a_batch(client, db_session):
    seed_sample_data(db_session)

    resp = client.post("/api/batches", json={"sku_id": 1, "planned_weight": 100})

    assert resp.status_code == 201
    assert "warning" not in resp.json()
    assert len(client.get("/api/batches/1").json()["items"]) == 3

import os

# Configure before the application modules read the environment
os.environ["LOG_DIR"] = ""
os.environ["SEED_SAMPLE_DATA"] = "0"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from crud.recipe import create_recipe
from crud.sku import create_sku
from schemas.recipe import RecipeCreate, RecipeItemCreate
from schemas.sku import SkuCreate
from seed_data import SAMPLE_RECIPE_ITEMS

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SAMPLE_ITEMS = SAMPLE_RECIPE_ITEMS


@pytest.fixture()
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_sku(db_session):
    def _make(name="Test Tablet", items=None, instructions="Mix 5 minutes"):
        sku = create_sku(db_session, SkuCreate(name=name))
        if items is not None:
            create_recipe(db_session, RecipeCreate(
                sku_id=sku.id,
                instructions=instructions,
                items=[RecipeItemCreate(**item) for item in items],
            ))
        return sku
    return _make


@pytest.fixture()
def sku_with_recipe(make_sku):
    return make_sku(items=SAMPLE_ITEMS)

"""
Sample catalog used to bootstrap an empty database.

Seeds one SKU with a three-line recipe so a fresh install can create a batch
straight away. Does nothing when any SKU already exists.
"""

import logging
from sqlalchemy.orm import Session

from crud.recipe import create_recipe
from crud.sku import create_sku
from models.sku import Sku
from schemas.recipe import RecipeCreate, RecipeItemCreate
from schemas.sku import SkuCreate

logger = logging.getLogger(__name__)

SAMPLE_SKU = {
    "name": "Sample Energy Tablet",
    "flavor": "Berry",
    "strength_mg": 250,
    "target_tablet_weight": 0.8,
}
SAMPLE_INSTRUCTIONS = "1) Verify all PPE. 2) Load ingredients per weights. 3) Mix at high speed for 5 minutes."
SAMPLE_RECIPE_ITEMS = [
    {"material": "Active Powder", "target_weight": 10, "unit": "kg"},
    {"material": "Binder", "target_weight": 2, "unit": "kg"},
    {"material": "Flavor", "target_weight": 0.5, "unit": "kg"},
]


def seed_sample_data(db: Session) -> bool:
    """Insert the sample SKU and recipe if the catalog is empty. Returns True when seeded."""
    if db.query(Sku.id).first() is not None:
        return False
    sku = create_sku(db, SkuCreate(**SAMPLE_SKU))
    create_recipe(db, RecipeCreate(
        sku_id=sku.id,
        instructions=SAMPLE_INSTRUCTIONS,
        items=[RecipeItemCreate(**item) for item in SAMPLE_RECIPE_ITEMS],
    ))
    logger.info("Seeded sample catalog with sku_id=%s", sku.id)
    return True

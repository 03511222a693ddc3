import logging
from sqlalchemy.orm import Session
from models.recipe import Recipe
from models.recipe_item import RecipeItem
from schemas.recipe import RecipeCreate

logger = logging.getLogger(__name__)


def get_current_recipe(db: Session, sku_id: int):
    """The authoritative recipe for a SKU: the one with the highest id, or None."""
    return db.query(Recipe).filter(Recipe.sku_id == sku_id).order_by(Recipe.id.desc()).first()


def get_recipe_items(db: Session, recipe_id: int):
    return db.query(RecipeItem).filter(RecipeItem.recipe_id == recipe_id).order_by(RecipeItem.id).all()


def create_recipe(db: Session, recipe: RecipeCreate):
    """Add a recipe for a SKU. The new recipe supersedes any earlier one."""
    db_recipe = Recipe(sku_id=recipe.sku_id, instructions=recipe.instructions)
    db.add(db_recipe)
    db.flush()
    for item in recipe.items:
        db.add(RecipeItem(recipe_id=db_recipe.id, **item.model_dump()))
    db.commit()
    db.refresh(db_recipe)
    logger.info("Created recipe id=%s for sku_id=%s with %d items", db_recipe.id, recipe.sku_id, len(recipe.items))
    return db_recipe

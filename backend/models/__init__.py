from models.sku import Sku
from models.recipe import Recipe
from models.recipe_item import RecipeItem
from models.batch import Batch
from models.batch_item import BatchItem
from models.press_run import PressRun

__all__ = ['Batch', 'BatchItem', 'PressRun', 'Recipe', 'RecipeItem', 'Sku',]

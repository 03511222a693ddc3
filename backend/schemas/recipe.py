from pydantic import BaseModel, field_validator
from typing import List, Optional


class RecipeItemBase(BaseModel):
    material: str
    target_weight: float
    unit: str = "kg"

    class Config:
        allow_inf_nan = False

    @field_validator('material')
    @classmethod
    def validate_material(cls, v):
        if not v or not v.strip():
            raise ValueError('material is required')
        return v

    @field_validator('target_weight')
    @classmethod
    def validate_target_weight(cls, v):
        if v <= 0:
            raise ValueError('target_weight must be greater than 0')
        return v

    @field_validator('unit', mode='before')
    @classmethod
    def default_unit(cls, v):
        return v or "kg"


class RecipeItemCreate(RecipeItemBase):
    pass


class RecipeItem(BaseModel):
    id: int
    recipe_id: int
    material: str
    target_weight: float
    unit: str

    class Config:
        from_attributes = True


class RecipeCreate(BaseModel):
    sku_id: int
    instructions: Optional[str] = None
    items: List[RecipeItemCreate] = []


class Recipe(BaseModel):
    id: int
    sku_id: int
    instructions: Optional[str] = None
    items: List[RecipeItem] = []

    class Config:
        from_attributes = True

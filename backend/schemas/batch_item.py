from pydantic import BaseModel, field_validator
from typing import List, Optional


class BatchItem(BaseModel):
    id: int
    batch_id: int
    material: str
    target_weight: float
    unit: str
    picked_weight: Optional[float] = None
    lot: Optional[str] = None

    class Config:
        from_attributes = True


class BatchItemPick(BaseModel):
    """One picking line. Omitted fields keep their stored value, null clears it."""
    id: int
    picked_weight: Optional[float] = None
    lot: Optional[str] = None

    class Config:
        allow_inf_nan = False


class BatchItemsUpdate(BaseModel):
    items: List[BatchItemPick]

    @field_validator('items')
    @classmethod
    def validate_items(cls, v):
        if not v:
            raise ValueError('items array is required')
        return v


class UpdatedCount(BaseModel):
    updated: int

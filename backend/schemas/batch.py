from typing import List, Optional
from pydantic import BaseModel, field_validator
from datetime import datetime
from schemas.batch_item import BatchItem
from schemas.recipe import Recipe


class BatchBase(BaseModel):
    sku_id: int
    planned_weight: float

    class Config:
        allow_inf_nan = False

    @field_validator('sku_id')
    @classmethod
    def validate_sku_id(cls, v):
        if v <= 0:
            raise ValueError('sku_id must be a positive id')
        return v

    @field_validator('planned_weight')
    @classmethod
    def validate_planned_weight(cls, v):
        if v <= 0:
            raise ValueError('planned_weight must be greater than 0')
        return v


class BatchCreate(BatchBase):
    pass


class BatchCreated(BaseModel):
    id: int
    warning: Optional[str] = None


class Batch(BaseModel):
    id: int
    sku_id: int
    planned_weight: float
    status: str
    picked_by: Optional[str] = None
    mixed_by: Optional[str] = None
    press_operator: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BatchStatusUpdate(BaseModel):
    """Status change plus optional attribution.

    Attribution fields are only written when present in the payload.
    """
    status: str
    picked_by: Optional[str] = None
    mixed_by: Optional[str] = None
    press_operator: Optional[str] = None

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        if not v or not v.strip():
            raise ValueError('status is required')
        return v.strip()


class BatchDetail(BaseModel):
    batch: Batch
    items: List[BatchItem]
    recipe: Optional[Recipe] = None

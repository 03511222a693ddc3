from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime


class PressRunCreate(BaseModel):
    batch_id: int
    received_weight: Optional[float] = None
    tablet_weight: Optional[float] = None

    class Config:
        allow_inf_nan = False

    @field_validator('batch_id')
    @classmethod
    def validate_batch_id(cls, v):
        if v <= 0:
            raise ValueError('batch_id is required')
        return v


class PressRunCreated(BaseModel):
    id: int
    expected_tablet_count: Optional[int] = None


class PressRunComplete(BaseModel):
    """Completion weights. Omitted fields keep their stored value, null clears it."""
    final_weight: Optional[float] = None
    loss_weight: Optional[float] = None

    class Config:
        allow_inf_nan = False


class PressRun(BaseModel):
    id: int
    batch_id: int
    received_weight: Optional[float] = None
    tablet_weight: Optional[float] = None
    expected_tablet_count: Optional[int] = None
    final_weight: Optional[float] = None
    loss_weight: Optional[float] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime


class SkuBase(BaseModel):
    name: str
    flavor: Optional[str] = None
    strength_mg: Optional[float] = None
    target_tablet_weight: Optional[float] = None

    class Config:
        allow_inf_nan = False

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError('name is required')
        return v.strip()


class SkuCreate(SkuBase):
    pass


class Sku(BaseModel):
    id: int
    name: str
    flavor: Optional[str] = None
    strength_mg: Optional[float] = None
    target_tablet_weight: Optional[float] = None
    created_at: datetime

    class Config:
        from_attributes = True


class SkuCreated(BaseModel):
    id: int

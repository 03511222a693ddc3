from typing import List
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from crud import sku as crud_sku
from schemas.sku import Sku, SkuCreate, SkuCreated

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/skus",
    tags=["SKUs"],
)


@router.post("", response_model=SkuCreated, status_code=status.HTTP_201_CREATED)
def create_sku(sku: SkuCreate, db: Session = Depends(get_db)):
    db_sku = crud_sku.create_sku(db, sku)
    return {"id": db_sku.id}


@router.get("", response_model=List[Sku])
def read_skus(db: Session = Depends(get_db)):
    """All SKUs, newest first."""
    return crud_sku.get_skus(db)

from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
import crud.batch as crud_batch
import crud.batch_item as crud_batch_item
import crud.recipe as crud_recipe
import crud.sku as crud_sku
from schemas.batch import Batch, BatchCreate, BatchCreated, BatchDetail, BatchStatusUpdate
from schemas.batch_item import BatchItemsUpdate, UpdatedCount

# --- Logging Configuration (import and get logger) ---
logger = logging.getLogger(__name__)


router = APIRouter(
    prefix="/api/batches",
    tags=["Batches"],
)


@router.post("", response_model=BatchCreated, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
def create_batch(batch: BatchCreate, db: Session = Depends(get_db)):
    """
    Create a pending batch for a SKU.

    The SKU's current recipe is copied into the batch's items. When there is
    no recipe, or the recipe has no items, the batch is still created and the
    response carries a ``warning``.
    """
    if crud_sku.get_sku(db, batch.sku_id) is None:
        logger.warning("Batch requested for unknown sku_id=%s", batch.sku_id)
        raise HTTPException(status_code=404, detail="sku not found")
    db_batch, warning = crud_batch.create_batch(db, batch)
    return {"id": db_batch.id, "warning": warning}


@router.get("", response_model=List[Batch])
def read_batches(status: Optional[str] = None, db: Session = Depends(get_db)):
    logger.info("Fetching batches with status=%s", status)
    return crud_batch.get_batches(db, status=status)


@router.get("/{batch_id}", response_model=BatchDetail)
def read_batch(batch_id: int, db: Session = Depends(get_db)):
    """Batch with its as-picked items and the SKU's current recipe."""
    db_batch = crud_batch.get_batch(db, batch_id)
    if db_batch is None:
        logger.warning("Batch with batch_id=%d not found", batch_id)
        raise HTTPException(status_code=404, detail="batch not found")
    items = crud_batch.get_batch_items(db, batch_id)
    # Resolved live: may differ from the snapshot the items were copied from
    recipe = crud_recipe.get_current_recipe(db, db_batch.sku_id)
    return {"batch": db_batch, "items": items, "recipe": recipe}


@router.patch("/{batch_id}/status", response_model=UpdatedCount)
def update_batch_status(batch_id: int, update: BatchStatusUpdate, db: Session = Depends(get_db)):
    updated = crud_batch.update_batch_status(db, batch_id, update)
    return {"updated": updated}


@router.patch("/{batch_id}/items", response_model=UpdatedCount)
def update_batch_items(batch_id: int, update: BatchItemsUpdate, db: Session = Depends(get_db)):
    updated = crud_batch_item.update_batch_items(db, batch_id, update.items)
    return {"updated": updated}

import logging
from sqlalchemy.orm import Session
from models.audit_mixin import now_local
from models.batch import Batch, STATUS_PENDING
from models.batch_item import BatchItem
from models.recipe_item import DEFAULT_UNIT
from schemas.batch import BatchCreate, BatchStatusUpdate
from crud.recipe import get_current_recipe, get_recipe_items
from utils import sqlalchemy_to_dict

logger = logging.getLogger(__name__)

WARNING_NO_RECIPE = "Batch created without recipe items"
WARNING_EMPTY_RECIPE = "Batch created; recipe has no items"

ATTRIBUTION_FIELDS = ("picked_by", "mixed_by", "press_operator")


def get_batch(db: Session, batch_id: int):
    return db.query(Batch).filter(Batch.id == batch_id).first()


def get_batches(db: Session, status: str = None):
    """Batches newest first, optionally restricted to an exact status label."""
    query = db.query(Batch)
    # labels are stored stripped, see BatchStatusUpdate
    status = status.strip() if status else status
    if status:
        query = query.filter(Batch.status == status)
    return query.order_by(Batch.created_at.desc(), Batch.id.desc()).all()


def get_batch_items(db: Session, batch_id: int):
    return db.query(BatchItem).filter(BatchItem.batch_id == batch_id).order_by(BatchItem.id).all()


def create_batch(db: Session, batch: BatchCreate):
    """
    Create a pending batch and snapshot the SKU's current recipe into batch items.

    Returns a ``(batch, warning)`` tuple. ``warning`` is None when recipe items
    were copied, otherwise it explains why the batch has no items.
    """
    db_batch = Batch(
        sku_id=batch.sku_id,
        planned_weight=batch.planned_weight,
        status=STATUS_PENDING,
    )
    db.add(db_batch)
    db.flush()

    warning = None
    recipe = get_current_recipe(db, batch.sku_id)
    if recipe is None:
        warning = WARNING_NO_RECIPE
    else:
        recipe_items = get_recipe_items(db, recipe.id)
        if not recipe_items:
            warning = WARNING_EMPTY_RECIPE
        for item in recipe_items:
            db.add(BatchItem(
                batch_id=db_batch.id,
                material=item.material,
                target_weight=item.target_weight,
                unit=item.unit or DEFAULT_UNIT,
                picked_weight=None,
                lot=None,
            ))

    db.commit()
    db.refresh(db_batch)
    if warning:
        logger.warning("Batch id=%s for sku_id=%s: %s", db_batch.id, batch.sku_id, warning)
    else:
        logger.info("Created batch id=%s for sku_id=%s from recipe id=%s", db_batch.id, batch.sku_id, recipe.id)
    return db_batch, warning


def update_batch_status(db: Session, batch_id: int, update: BatchStatusUpdate) -> int:
    """
    Replace the status label of a batch. Any transition is accepted.

    Attribution fields are written only when they were sent. Returns the
    number of batches updated, 0 when the id is unknown.
    """
    db_batch = get_batch(db, batch_id)
    if db_batch is None:
        logger.warning("Status update for unknown batch_id=%s ignored", batch_id)
        return 0

    old_values = sqlalchemy_to_dict(db_batch)
    db_batch.status = update.status
    for field in ATTRIBUTION_FIELDS:
        if field in update.model_fields_set:
            setattr(db_batch, field, getattr(update, field))
    db_batch.updated_at = now_local()
    db.commit()
    db.refresh(db_batch)
    logger.info("Batch id=%s status %s -> %s", batch_id, old_values["status"], db_batch.status)
    return 1

import logging
from typing import List
from sqlalchemy.orm import Session
from models.audit_mixin import now_local
from models.batch import Batch
from models.batch_item import BatchItem
from schemas.batch_item import BatchItemPick

logger = logging.getLogger(__name__)

PICK_FIELDS = ("picked_weight", "lot")


def update_batch_items(db: Session, batch_id: int, items: List[BatchItemPick]) -> int:
    """
    Record picked weights and lots against a batch's items.

    Lines whose id does not belong to ``batch_id`` are skipped. Fields left
    out of a line keep their stored value; fields sent as null are cleared.
    Returns the number of lines that matched.
    """
    updated = 0
    for item in items:
        db_item = db.query(BatchItem).filter(BatchItem.id == item.id, BatchItem.batch_id == batch_id).first()
        if db_item is None:
            logger.warning("Batch item id=%s not found on batch_id=%s, skipped", item.id, batch_id)
            continue
        for field in PICK_FIELDS:
            if field in item.model_fields_set:
                setattr(db_item, field, getattr(item, field))
        updated += 1

    if not updated:
        logger.info("No picking lines matched batch_id=%s", batch_id)
        return 0

    db_batch = db.query(Batch).filter(Batch.id == batch_id).first()
    if db_batch is not None:
        db_batch.updated_at = now_local()
    db.commit()
    logger.info("Updated %d of %d picking lines on batch_id=%s", updated, len(items), batch_id)
    return updated

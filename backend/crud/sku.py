import logging
from sqlalchemy.orm import Session
from models.sku import Sku
from schemas.sku import SkuCreate

logger = logging.getLogger(__name__)


def get_sku(db: Session, sku_id: int):
    return db.query(Sku).filter(Sku.id == sku_id).first()


def get_skus(db: Session):
    """All SKUs, most recently created first."""
    return db.query(Sku).order_by(Sku.id.desc()).all()


def create_sku(db: Session, sku: SkuCreate):
    db_sku = Sku(**sku.model_dump())
    db.add(db_sku)
    db.commit()
    db.refresh(db_sku)
    logger.info("Created SKU id=%s name=%s", db_sku.id, db_sku.name)
    return db_sku

from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
from models.recipe_item import DEFAULT_UNIT


class BatchItem(Base):
    """Snapshot of a recipe line taken when the batch was created.

    material, target_weight and unit are copied from the recipe and never
    re-synced; only picked_weight and lot change afterwards.
    """
    __tablename__ = "batch_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    batch_id = Column(Integer, ForeignKey("batches.id"), nullable=False, index=True)
    material = Column(String, nullable=False)
    target_weight = Column(Float, nullable=False)
    unit = Column(String, default=DEFAULT_UNIT, nullable=False)
    picked_weight = Column(Float, nullable=True)
    lot = Column(String, nullable=True)

    batch = relationship("Batch", back_populates="items")

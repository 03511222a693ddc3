from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin

# Labels used by the floor UI. The status column itself is free-form text and
# any non-blank value is accepted on update.
STATUS_PENDING = "pending"
STATUS_PICKING = "picking"
STATUS_MIXING = "mixing"
STATUS_PRESSING = "pressing"
STATUS_COMPLETED = "completed"
KNOWN_STATUSES = (STATUS_PENDING, STATUS_PICKING, STATUS_MIXING, STATUS_PRESSING, STATUS_COMPLETED)


class Batch(Base, TimestampMixin):
    __tablename__ = "batches"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    sku_id = Column(Integer, ForeignKey("skus.id"), nullable=False, index=True)
    planned_weight = Column(Float, nullable=False)
    status = Column(String, default=STATUS_PENDING, nullable=False, index=True)
    picked_by = Column(String, nullable=True)
    mixed_by = Column(String, nullable=True)
    press_operator = Column(String, nullable=True)

    sku = relationship("Sku", back_populates="batches")
    items = relationship("BatchItem", back_populates="batch", order_by="BatchItem.id")
    press_runs = relationship("PressRun", back_populates="batch")

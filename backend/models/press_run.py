from sqlalchemy import Column, Integer, Float, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin


class PressRun(Base, TimestampMixin):
    __tablename__ = "press_runs"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    batch_id = Column(Integer, ForeignKey("batches.id"), nullable=False, index=True)
    received_weight = Column(Float, nullable=True)
    tablet_weight = Column(Float, nullable=True)
    expected_tablet_count = Column(Integer, nullable=True)
    final_weight = Column(Float, nullable=True)
    loss_weight = Column(Float, nullable=True)

    batch = relationship("Batch", back_populates="press_runs")

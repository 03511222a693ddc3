from sqlalchemy import Column, Integer, String, Float
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import CreatedAtMixin


class Sku(Base, CreatedAtMixin):
    __tablename__ = "skus"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    flavor = Column(String, nullable=True)
    strength_mg = Column(Float, nullable=True)
    target_tablet_weight = Column(Float, nullable=True)

    recipes = relationship("Recipe", back_populates="sku", order_by="Recipe.id")
    batches = relationship("Batch", back_populates="sku")

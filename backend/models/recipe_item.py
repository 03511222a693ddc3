from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from database import Base

DEFAULT_UNIT = "kg"


class RecipeItem(Base):
    __tablename__ = "recipe_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    material = Column(String, nullable=False)
    target_weight = Column(Float, nullable=False)
    unit = Column(String, default=DEFAULT_UNIT, nullable=False)

    recipe = relationship("Recipe", back_populates="items")

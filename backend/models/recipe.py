from sqlalchemy import Column, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from database import Base


class Recipe(Base):
    __tablename__ = "recipes"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    sku_id = Column(Integer, ForeignKey("skus.id"), nullable=False, index=True)
    instructions = Column(Text, nullable=True)

    sku = relationship("Sku", back_populates="recipes")
    items = relationship("RecipeItem", back_populates="recipe", order_by="RecipeItem.id")

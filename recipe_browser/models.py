from sqlalchemy import JSON, Column, Float, Integer, Text
# relationship not used; models are simple
from .db import Base


class Recipe(Base):
    __tablename__ = "recipes"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    cuisine = Column(Text, nullable=True, index=True)
    rating = Column(Float, nullable=True)  # 0-5
    prep_time = Column(Integer, nullable=True)  # minutes
    cook_time = Column(Integer, nullable=True)
    total_time = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    nutrients = Column(JSON(none_as_null=True), nullable=True)  # name -> free text, e.g. "389 kcal"
    serves = Column(Text, nullable=True)

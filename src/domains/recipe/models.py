import uuid6

from sqlalchemy import Column, ForeignKey, Integer, String, Text, DateTime, JSON, CheckConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import Uuid
from sqlalchemy.sql import func

from core.database import Base


class Recipe(Base):
    __tablename__ = "recipes"
    __table_args__ = (
        CheckConstraint("servings > 0", name="ck_recipes_servings_positive"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid6.uuid7)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    image_url = Column(Text)
    ingredients = Column(JSON(none_as_null=True).with_variant(JSONB(none_as_null=True), "postgresql"))
    prep_time = Column(String(50))
    cook_time = Column(String(50))
    servings = Column(Integer)
    difficulty = Column(String(10))
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

"""Category model shared by recipes and stock items."""
import uuid
from datetime import datetime

from sqlalchemy import Column, String, TIMESTAMP, ForeignKey, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID

from . import Base


class Category(Base):
    """Per-client grouping, e.g. 'Breads' for recipes or 'Flours' for raw materials."""

    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("client_id", "name", "category_type", name="uq_categories_client_name_type"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id"), nullable=False)
    name = Column(String(100), nullable=False)
    category_type = Column(String(20), nullable=False, default="RECIPE")  # 'RECIPE', 'RAW_MATERIAL', 'INTERMEDIATE'
    created_at = Column(TIMESTAMP, default=datetime.utcnow)

    def __repr__(self):
        return f"<Category(name='{self.name}', type='{self.category_type}')>"

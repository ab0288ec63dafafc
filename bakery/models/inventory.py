"""RawMaterial and IntermediateProduct stock models."""
import uuid
from datetime import datetime

from sqlalchemy import (
    Column, String, Boolean, TIMESTAMP,
    ForeignKey, Numeric, Index
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from . import Base


class RawMaterial(Base):
    """Purchased ingredient lots with on-hand quantity, expiry and quality state."""

    __tablename__ = "raw_materials"
    __table_args__ = (
        Index("idx_raw_materials_client", "client_id"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id"), nullable=False)
    category_id = Column(UUID(as_uuid=True), ForeignKey("categories.id"))
    name = Column(String(100), nullable=False)
    batch_number = Column(String(100))
    quantity = Column(Numeric(12, 3), nullable=False, default=0)  # On hand, in `unit`
    unit = Column(String(20), nullable=False)  # 'kg', 'L', 'pcs'
    unit_cost = Column(Numeric(12, 4))  # Cost per `unit`
    reorder_level = Column(Numeric(12, 3), default=0)
    expiration_date = Column(TIMESTAMP)
    is_contaminated = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    category = relationship("Category")
    recipe_ingredients = relationship("RecipeIngredient", back_populates="raw_material")

    def __repr__(self):
        return f"<RawMaterial(name='{self.name}', quantity={self.quantity} {self.unit})>"


class IntermediateProduct(Base):
    """Semi-finished goods produced in-house (doughs, fillings) and used as ingredients."""

    __tablename__ = "intermediate_products"
    __table_args__ = (
        Index("idx_intermediate_products_client", "client_id"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id"), nullable=False)
    category_id = Column(UUID(as_uuid=True), ForeignKey("categories.id"))
    recipe_id = Column(UUID(as_uuid=True), ForeignKey("recipes.id", ondelete="SET NULL"))  # Recipe that produced it
    name = Column(String(100), nullable=False)
    batch_number = Column(String(100))
    quantity = Column(Numeric(12, 3), nullable=False, default=0)
    unit = Column(String(20), nullable=False)
    unit_cost = Column(Numeric(12, 4))
    status = Column(String(20), default="IN_PRODUCTION")  # 'IN_PRODUCTION', 'COMPLETED', 'ON_HOLD', 'DISCARDED'
    production_date = Column(TIMESTAMP)
    expiration_date = Column(TIMESTAMP)
    is_contaminated = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    category = relationship("Category")
    recipe_ingredients = relationship("RecipeIngredient", back_populates="intermediate_product")

    def __repr__(self):
        return f"<IntermediateProduct(name='{self.name}', quantity={self.quantity} {self.unit})>"

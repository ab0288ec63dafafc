"""Request-scoped dependencies shared by the API routers."""
from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from bakery.database import get_db
from bakery.services.inventory_snapshot import TenantSnapshot


def get_client_id(
    x_client_id: UUID = Header(..., description="Tenant id resolved by the auth gateway"),
) -> UUID:
    """Client (tenant) id for the current request."""
    return x_client_id


def get_tenant_snapshot(
    client_id: UUID = Depends(get_client_id),
    db: Session = Depends(get_db),
) -> TenantSnapshot:
    """Tenant-scoped data handle for the feasibility and costing endpoints."""
    return TenantSnapshot(db, client_id)

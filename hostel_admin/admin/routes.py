from typing import Optional

from fastapi import APIRouter, Depends

from hostel_admin.admin.schemas import (
    AdminDeletion, AdminHostelLookup, AdminRegistration, AdminTokenLookup, AdminUpdate
)
from hostel_admin.admin.management_service import (
    delete_admin_service, get_admin_by_token_service, get_admin_hostel_service,
    register_admin_service, update_admin_service
)
from hostel_admin.core.auth import get_bearer_token
from hostel_admin.database.mongo_connection import get_database

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/register")
async def register_admin(admin_data: AdminRegistration, db=Depends(get_database)):
    """
    Register a hostel admin

    Requires every profile field plus the hostel name and a password.
    Returns a token for the new admin's user account.
    """
    return await register_admin_service(db, admin_data.model_dump())


@router.api_route("/update", methods=["POST", "PUT"])
async def update_admin(admin_data: AdminUpdate, db=Depends(get_database)):
    """Overwrite the profile of the admin with the given email"""
    return await update_admin_service(db, admin_data.model_dump())


@router.post("/hostel")
async def get_admin_hostel(lookup: AdminHostelLookup, db=Depends(get_database)):
    """Get the hostel managed by an admin"""
    return await get_admin_hostel_service(db, lookup.id)


@router.post("/me")
async def get_current_admin(
    lookup: AdminTokenLookup,
    header_token: Optional[str] = Depends(get_bearer_token),
    db=Depends(get_database)
):
    """
    Get the admin behind a token

    The token is read from the body, or from the Authorization header when
    the body has none.
    """
    return await get_admin_by_token_service(db, lookup.isAdmin, lookup.token or header_token)


@router.delete("")
async def delete_admin(deletion: AdminDeletion, db=Depends(get_database)):
    """Delete an admin and its user account"""
    return await delete_admin_service(db, deletion.email)

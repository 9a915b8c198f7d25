"""Admin login, bulk reset and statistics routes"""

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_admin_repository, get_caller_is_admin, get_store
from domain.schemas.participant_schemas import (
    AdminLoginRequest,
    AdminLoginResponse,
    AdminUser,
    ResetAllResponse,
    StatsResponse,
)
from repositories.base import AdminStore, EntitlementStore
from services import AdminService, EntitlementService

router = APIRouter(tags=["Admin"])
logger = logging.getLogger("foodcourt.api.admin")


@router.post("/admin/login", response_model=AdminLoginResponse)
def admin_login(
    body: AdminLoginRequest, admin_repository: AdminStore = Depends(get_admin_repository)
):
    """
    Verify admin credentials.

    Clients keep the credentials and send them as HTTP Basic auth on admin routes.
    """
    user = AdminService.login(admin_repository, body.username, body.password)
    return AdminLoginResponse(message="Login successful", user=AdminUser(**user))


@router.put("/reset-meals", response_model=ResetAllResponse)
def reset_all_meals(
    store: EntitlementStore = Depends(get_store),
    caller_is_admin: bool = Depends(get_caller_is_admin),
):
    """Reset every meal of every participant (admin)."""
    touched = EntitlementService.reset_all_meals(store, caller_is_admin)
    return ResetAllResponse(message="All meals reset successfully", modified_count=touched)


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    store: EntitlementStore = Depends(get_store),
    caller_is_admin: bool = Depends(get_caller_is_admin),
):
    """Participant and meal consumption totals (admin)."""
    return EntitlementService.compute_stats(store, caller_is_admin)

"""
Services package - Business logic layer.
"""

from services.entitlement_service import EntitlementService
from services.admin_service import AdminService

__all__ = [
    "EntitlementService",
    "AdminService",
]

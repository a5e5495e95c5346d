"""Application layer: interfaces, DTOs, and authorization services.

Depends only on domain and protocol definitions (DIP).
"""

from app.application.interfaces import IPermissionSource
from app.application.services.authorization_service import AuthorizationService

__all__ = [
    "AuthorizationService",
    "IPermissionSource",
]

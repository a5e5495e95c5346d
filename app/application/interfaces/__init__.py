"""Application interfaces (ports): service protocols.

No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.services import IPermissionSource

__all__ = ["IPermissionSource"]

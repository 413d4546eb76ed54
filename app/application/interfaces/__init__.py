"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import IDatabase, IUserAuthRepository
from app.application.interfaces.services import IServiceInfoService, IUserAuthService

__all__ = [
    "IDatabase",
    "IServiceInfoService",
    "IUserAuthRepository",
    "IUserAuthService",
]

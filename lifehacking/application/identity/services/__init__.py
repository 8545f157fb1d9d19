from .user_ownership_service import UserOwnershipService

__all__ = [
    "UserOwnershipService",
]

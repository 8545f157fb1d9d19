from .delete_user_use_case import DeleteUserUseCase
from .get_user_by_external_auth_id_use_case import GetUserByExternalAuthIdUseCase
from .get_user_by_id_use_case import GetUserByIdUseCase

__all__ = [
    "DeleteUserUseCase",
    "GetUserByExternalAuthIdUseCase",
    "GetUserByIdUseCase",
]

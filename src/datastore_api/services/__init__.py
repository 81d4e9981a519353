"""Service layer.

Services call the collaborators through protocols and translate driver
failures into ``datastore_api.errors`` types.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Errors) -> (Data Access)
"""

from .key_value_service import KeyValueService
from .user_service import UserService

__all__ = [
    "KeyValueService",
    "UserService",
]

"""CRUD operations for the User model."""

from cradle.crud._base import CRUDBase
from cradle.models.user import User


class CRUDUser(CRUDBase[User]):
    """CRUD operations for the User model."""


user = CRUDUser(User)

"""CRUD operations for the application."""

from .crud_daily_usage import daily_usage
from .crud_photo import photo
from .crud_user import user

__all__ = ["daily_usage", "photo", "user"]

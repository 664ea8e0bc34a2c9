"""Models for the application."""

from cradle.models._base import Base
from cradle.models.daily_usage import DailyUsage
from cradle.models.photo import Photo
from cradle.models.user import User

__all__ = ["Base", "DailyUsage", "Photo", "User"]

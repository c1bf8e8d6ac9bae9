from __future__ import annotations

from django.conf import settings

from .repositories import UserRepository
from .services import UserService


def build_user_service() -> UserService:
    return UserService(users=UserRepository(), default_address=settings.DEFAULT_ADDRESS)

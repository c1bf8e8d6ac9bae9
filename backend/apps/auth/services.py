from __future__ import annotations

from typing import Any, Dict

from django.contrib.auth.hashers import make_password

from apps.api.exceptions import ApplicationError
from apps.common import get_logger
from .protocols import UserRegistrationRepositoryProtocol

logger = get_logger(__name__).bind(component="auth", service="RegistrationService")


class RegistrationService:
    def __init__(self, users: UserRegistrationRepositoryProtocol):
        self.users = users
        self.logger = logger

    def _check_uniqueness(self, username: str, email: str) -> None:
        if self.users.username_exists(username):
            self.logger.info(
                "Registration rejected: username already exists", username=username
            )
            raise ApplicationError(
                "VALIDATION_ERROR", "Username already exists", details={"username": username}
            )
        if self.users.email_exists(email):
            self.logger.info("Registration rejected: email already exists", email=email)
            raise ApplicationError(
                "VALIDATION_ERROR", "Email already taken", details={"email": email}
            )

    def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a customer account; wallet and address start from their defaults."""
        username = data["username"].strip()
        email = data["email"].strip().lower()
        self.logger.debug("Received registration request", username=username, email=email)
        self._check_uniqueness(username, email)
        user = self.users.create_user(
            username=username,
            email=email,
            password=make_password(data["password"]),
            first_name=data.get("first_name", "").strip(),
            last_name=data.get("last_name", "").strip(),
        )
        self.logger.info("User registered", user_id=user.id, username=user.username)
        return {"id": user.id, "username": user.username, "email": user.email}

from __future__ import annotations

from apps.api.exceptions import NotFoundError
from apps.common import get_logger
from .dtos import UserDTO, user_to_dto
from .protocols import UserRepositoryProtocol

logger = get_logger(__name__).bind(component="users", layer="service")


class UserService:
    def __init__(self, users: UserRepositoryProtocol, default_address: str):
        self.users = users
        self.default_address = default_address
        self.logger = logger.bind(service="UserService")

    def get_profile(self, user_id: int) -> UserDTO:
        self.logger.debug("Fetching user profile", user_id=user_id)
        user = self.users.get(id=user_id)
        if not user:
            self.logger.info("User not found", user_id=user_id)
            raise NotFoundError("User not found")
        return user_to_dto(user, self.default_address)

    def set_address(self, user_id: int, address: str) -> UserDTO:
        user = self.users.get(id=user_id)
        if not user:
            self.logger.warning("Address update failed: user missing", user_id=user_id)
            raise NotFoundError("User not found")
        user.address = address
        self.users.save(user, update_fields=["address"])
        self.logger.info("Shipping address updated", user_id=user_id)
        return user_to_dto(user, self.default_address)

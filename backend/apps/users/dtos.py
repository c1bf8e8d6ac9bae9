from dataclasses import dataclass
from typing import Optional

from .models import User


@dataclass
class UserDTO:
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    wallet_money: str
    address: str
    address_set: bool
    date_joined: Optional[str]


def user_to_dto(u: User, default_address: str) -> UserDTO:
    joined = getattr(u, "date_joined", None)
    if joined is not None:
        try:
            joined = joined.isoformat()
        except AttributeError:
            joined = str(joined)
    return UserDTO(
        id=u.id,
        username=u.username,
        email=u.email,
        first_name=u.first_name,
        last_name=u.last_name,
        wallet_money=str(u.wallet_money),
        address=u.address,
        address_set=u.has_set_non_default_address(default_address),
        date_joined=joined,
    )

from decimal import Decimal

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models


def default_address() -> str:
    return settings.DEFAULT_ADDRESS


def default_wallet_money() -> Decimal:
    return Decimal(str(settings.DEFAULT_WALLET_MONEY))


class User(AbstractUser):
    # id, username, password, is_active, is_staff, is_superuser, groups, user_permissions are inherited
    # Carts are keyed by email, so it has to be unique.
    email = models.EmailField(unique=True)
    wallet_money = models.DecimalField(
        max_digits=12, decimal_places=2, default=default_wallet_money
    )
    address = models.TextField(default=default_address)

    def has_set_non_default_address(self, default_address: str) -> bool:
        """True once the user replaced the sentinel with a real shipping address."""
        address = (self.address or "").strip()
        return bool(address) and address != default_address

    def __str__(self):
        return self.username

from __future__ import annotations

from typing import List, Optional, Tuple

from django.db import DatabaseError, transaction

from apps.api.exceptions import BadRequestError, InternalError, NotFoundError
from apps.common import get_logger
from .dtos import CartDTO
from .models import Cart, CartProduct
from .protocols import (
    CartMapperProtocol,
    CartProductRepositoryProtocol,
    CartRepositoryProtocol,
    ProductRepositoryProtocol,
    UserRepositoryProtocol,
)
from .utils import cart_total, find_cart_item

logger = get_logger(__name__).bind(component="carts", layer="service")

NO_CART = "User does not have a cart"
NO_CART_FOR_UPDATE = "User does not have a cart. Use POST to create cart and add a product"
PRODUCT_MISSING = "Product doesn't exist in database"
PRODUCT_ALREADY_IN_CART = (
    "Product already in cart. Use the cart sidebar to update or remove product from cart"
)
PRODUCT_NOT_IN_CART = "Product not in cart"
CART_CREATION_FAILED = "Internal server Error! Cart Creation failed."
EMPTY_CART = "No product in a cart"
ADDRESS_NOT_SET = "ADDRESS_NOT_SET"
INSUFFICIENT_BALANCE = "wallet balance is insufficient"


class CartNotFoundError(NotFoundError):
    """The user has no cart yet."""


class CartBadRequestError(BadRequestError):
    """The cart operation is invalid for the cart's current contents."""


class CartInternalError(InternalError):
    """A new cart could not be persisted."""


class CartService:
    """
    Cart operations for an authenticated user.

    Every operation is a load -> validate -> mutate -> save sequence through
    the repositories. Nothing is locked between the load and the save, so two
    concurrent requests for the same cart may overwrite each other.
    """

    def __init__(
        self,
        carts: CartRepositoryProtocol,
        cart_products: CartProductRepositoryProtocol,
        products: ProductRepositoryProtocol,
        users: UserRepositoryProtocol,
        cart_mapper: CartMapperProtocol,
        default_address: str,
    ):
        self.carts = carts
        self.cart_products = cart_products
        self.products = products
        self.users = users
        self.cart_mapper = cart_mapper
        self.default_address = default_address
        self.logger = logger.bind(service="CartService")

    def _load(self, email: str) -> Tuple[Optional[Cart], List[CartProduct]]:
        cart = self.carts.get_for_email(email)
        if not cart:
            return None, []
        return cart, list(self.cart_products.list_for_cart(cart))

    def _get_product(self, product_id: int):
        product = self.products.get(id=product_id)
        if not product:
            self.logger.warning("Product lookup failed", product_id=product_id)
            raise CartBadRequestError(PRODUCT_MISSING, details={"productId": str(product_id)})
        return product

    def get_cart_by_user(self, user) -> CartDTO:
        self.logger.debug("Fetching cart", email=user.email)
        cart, items = self._load(user.email)
        if not cart:
            self.logger.info("Cart not found", email=user.email)
            raise CartNotFoundError(NO_CART)
        return self.cart_mapper.to_dto(cart, items)

    def add_product_to_cart(self, user, product_id: int, quantity: int) -> CartDTO:
        self.logger.debug(
            "Adding product to cart", email=user.email, product_id=product_id, quantity=quantity
        )
        product = self._get_product(product_id)
        cart, items = self._load(user.email)
        if not cart:
            return self._create_cart(user.email, product, quantity)
        if find_cart_item(items, product_id) is not None:
            self.logger.warning(
                "Add rejected: product already in cart",
                email=user.email,
                product_id=product_id,
            )
            raise CartBadRequestError(PRODUCT_ALREADY_IN_CART)
        items.append(
            self.cart_products.create(cart=cart, product=product, quantity=quantity)
        )
        self.carts.save(cart)
        self.logger.info(
            "Product added to cart", cart_id=cart.id, product_id=product_id, items=len(items)
        )
        return self.cart_mapper.to_dto(cart, items)

    def _create_cart(self, email: str, product, quantity: int) -> CartDTO:
        try:
            with transaction.atomic():
                cart = self.carts.create(email=email)
                if not cart:
                    raise CartInternalError(CART_CREATION_FAILED)
                item = self.cart_products.create(
                    cart=cart, product=product, quantity=quantity
                )
        except DatabaseError as exc:
            self.logger.error("Cart creation failed", email=email, error=str(exc))
            raise CartInternalError(CART_CREATION_FAILED) from exc
        self.logger.info("Cart created", cart_id=cart.id, email=email, product_id=product.id)
        return self.cart_mapper.to_dto(cart, [item])

    def update_product_in_cart(self, user, product_id: int, quantity: int) -> CartDTO:
        self.logger.debug(
            "Updating product quantity", email=user.email, product_id=product_id, quantity=quantity
        )
        self._get_product(product_id)
        cart, items = self._load(user.email)
        if not cart:
            self.logger.warning("Update rejected: no cart", email=user.email)
            raise CartBadRequestError(NO_CART_FOR_UPDATE)
        item = find_cart_item(items, product_id)
        if item is None:
            self.logger.warning(
                "Update rejected: product not in cart", cart_id=cart.id, product_id=product_id
            )
            raise CartBadRequestError(PRODUCT_NOT_IN_CART)
        item.quantity = quantity
        self.cart_products.save(item, update_fields=["quantity"])
        self.carts.save(cart)
        self.logger.info(
            "Cart item quantity updated", cart_id=cart.id, product_id=product_id, quantity=quantity
        )
        return self.cart_mapper.to_dto(cart, items)

    def delete_product_from_cart(self, user, product_id: int) -> CartDTO:
        self.logger.debug("Removing product from cart", email=user.email, product_id=product_id)
        cart, items = self._load(user.email)
        if not cart:
            self.logger.warning("Delete rejected: no cart", email=user.email)
            raise CartBadRequestError(NO_CART)
        item = find_cart_item(items, product_id)
        if item is None:
            self.logger.warning(
                "Delete rejected: product not in cart", cart_id=cart.id, product_id=product_id
            )
            raise CartBadRequestError(PRODUCT_NOT_IN_CART)
        self.cart_products.delete(item)
        items.remove(item)
        self.carts.save(cart)
        self.logger.info("Product removed from cart", cart_id=cart.id, product_id=product_id)
        return self.cart_mapper.to_dto(cart, items)

    def checkout(self, user) -> None:
        """
        Debit the cart total from the user's wallet and empty the cart.

        Guards run in order: cart exists, cart has items, address is not the
        default sentinel, a real address is set, wallet covers the total.
        Any failed guard leaves both the user and the cart untouched.
        """
        self.logger.debug("Checkout requested", email=user.email)
        cart, items = self._load(user.email)
        if not cart:
            self.logger.info("Checkout rejected: no cart", email=user.email)
            raise CartNotFoundError(NO_CART)
        if not items:
            self.logger.warning("Checkout rejected: empty cart", cart_id=cart.id)
            raise CartBadRequestError(EMPTY_CART)
        if user.address == self.default_address:
            self.logger.warning("Checkout rejected: default address", cart_id=cart.id)
            raise CartBadRequestError(ADDRESS_NOT_SET)
        if not user.has_set_non_default_address(self.default_address):
            self.logger.warning("Checkout rejected: address not set", cart_id=cart.id)
            raise CartBadRequestError(ADDRESS_NOT_SET)

        total = cart_total(items)
        if total > user.wallet_money:
            self.logger.warning(
                "Checkout rejected: insufficient balance",
                cart_id=cart.id,
                total=total,
                wallet=user.wallet_money,
            )
            raise CartBadRequestError(INSUFFICIENT_BALANCE)

        previous_balance = user.wallet_money
        try:
            with transaction.atomic():
                user.wallet_money = previous_balance - total
                self.users.save(user, update_fields=["wallet_money"])
                self.cart_products.delete_for_cart(cart)
                self.carts.save(cart)
        except Exception:
            user.wallet_money = previous_balance
            raise
        self.logger.info(
            "Checkout completed",
            cart_id=cart.id,
            email=user.email,
            total=total,
            wallet=user.wallet_money,
        )

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema

from apps.api.schemas import ErrorResponseSerializer, error_example
from apps.common import get_logger
from .container import build_cart_service
from .services import (
    ADDRESS_NOT_SET,
    EMPTY_CART,
    INSUFFICIENT_BALANCE,
    NO_CART,
    PRODUCT_ALREADY_IN_CART,
    PRODUCT_MISSING,
)
from .serializers import (
    CartItemAddSerializer,
    CartItemUpdateSerializer,
    CartReadSerializer,
)

logger = get_logger(__name__).bind(component="carts", layer="view")


@extend_schema(tags=["Cart"])
class CartView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(
        summary="Get my cart",
        responses={
            200: CartReadSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        dto = self.service.get_cart_by_user(request.user)
        return Response(CartReadSerializer(dto).data)

    @extend_schema(
        summary="Add product to cart",
        description=(
            "Adds a product line to the authenticated user's cart, creating the cart on first use. "
            "Adding a product that is already in the cart is rejected; use PUT to change its quantity."
        ),
        request=CartItemAddSerializer,
        responses={
            201: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
        examples=[
            error_example("Unknown product", "BAD_REQUEST", PRODUCT_MISSING, 400),
            error_example("Duplicate product", "BAD_REQUEST", PRODUCT_ALREADY_IN_CART, 400),
        ],
    )
    def post(self, request):
        serializer = CartItemAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product_id = serializer.validated_data["productId"]
        quantity = serializer.validated_data["quantity"]
        self.log.info(
            "Adding product via API", user_id=request.user.id, product_id=product_id
        )
        dto = self.service.add_product_to_cart(request.user, product_id, quantity)
        return Response(CartReadSerializer(dto).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Update product quantity",
        description="Sets the quantity of a product already in the cart. A quantity of 0 removes the product.",
        request=CartItemUpdateSerializer,
        responses={
            200: CartReadSerializer,
            204: None,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request):
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product_id = serializer.validated_data["productId"]
        quantity = serializer.validated_data["quantity"]
        if quantity == 0:
            self.log.info(
                "Removing product via zero quantity",
                user_id=request.user.id,
                product_id=product_id,
            )
            self.service.delete_product_from_cart(request.user, product_id)
            return Response(status=status.HTTP_204_NO_CONTENT)
        dto = self.service.update_product_in_cart(request.user, product_id, quantity)
        return Response(CartReadSerializer(dto).data)


@extend_schema(tags=["Cart"])
class CartProductView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartProductView")

    @extend_schema(
        summary="Remove product from cart",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={
            204: None,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, product_id: int):
        self.log.info(
            "Removing product via API", user_id=request.user.id, product_id=product_id
        )
        self.service.delete_product_from_cart(request.user, product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Cart"])
class CheckoutView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CheckoutView")

    @extend_schema(
        summary="Checkout cart",
        description=(
            "Pays for the cart from the wallet and empties it. Requires a non-default shipping "
            "address and enough wallet balance to cover the cart total."
        ),
        request=None,
        responses={
            204: None,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
        examples=[
            error_example("No cart", "NOT_FOUND", NO_CART, 404),
            error_example("Empty cart", "BAD_REQUEST", EMPTY_CART, 400),
            error_example("Address not set", "BAD_REQUEST", ADDRESS_NOT_SET, 400),
            error_example("Insufficient balance", "BAD_REQUEST", INSUFFICIENT_BALANCE, 400),
        ],
    )
    def put(self, request):
        self.log.info("Checkout via API", user_id=request.user.id)
        self.service.checkout(request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

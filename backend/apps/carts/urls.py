from django.urls import path
from .views import CartProductView, CartView, CheckoutView

urlpatterns = [
    path("", CartView.as_view(), name="api-cart"),
    path("checkout/", CheckoutView.as_view(), name="api-cart-checkout"),
    path(
        "products/<int:product_id>/",
        CartProductView.as_view(),
        name="api-cart-product",
    ),
]

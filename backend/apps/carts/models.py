from django.db import models

from apps.catalog.models import Product


class Cart(models.Model):
    id = models.AutoField(primary_key=True)
    # One cart per user, keyed by the owner's email.
    email = models.EmailField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Cart {self.id} for {self.email}"


class CartProduct(models.Model):
    cart = models.ForeignKey(
        Cart, on_delete=models.CASCADE, related_name="cart_products"
    )
    product = models.ForeignKey(Product, on_delete=models.CASCADE)
    # Not range-checked here; request serializers own quantity validation.
    quantity = models.IntegerField()

    class Meta:
        unique_together = ("cart", "product")
        db_table = "cart_products"
        ordering = ["id"]

from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=255, unique=True)
    category = models.CharField(max_length=100)
    cost = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    rating = models.PositiveSmallIntegerField(default=0)
    image = models.TextField(blank=True, default="")

    def __str__(self):
        return self.name

    class Meta:
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
        ]

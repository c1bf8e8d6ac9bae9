import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255, unique=True)),
                ("category", models.CharField(max_length=100)),
                (
                    "cost",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("rating", models.PositiveSmallIntegerField(default=0)),
                ("image", models.TextField(blank=True, default="")),
            ],
            options={
                "indexes": [
                    models.Index(fields=["category"], name="product_category_idx"),
                ],
            },
        ),
    ]

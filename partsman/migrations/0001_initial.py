import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import simple_history.models
import taggit.managers
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("taggit", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="CatalogItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("uuid", models.UUIDField(default=uuid.uuid4, editable=False, unique=True, verbose_name="UUID")),
                ("name", models.CharField(max_length=200, verbose_name="name")),
                (
                    "category",
                    models.CharField(
                        blank=True,
                        db_index=True,
                        help_text="cpu, gpu, ram, gaming-pc, etc.",
                        max_length=50,
                        verbose_name="category",
                    ),
                ),
                ("description", models.TextField(blank=True, verbose_name="description")),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0"),
                        max_digits=10,
                        validators=[
                            django.core.validators.MinValueValidator(0, message="Price must not be negative")
                        ],
                        verbose_name="price",
                    ),
                ),
                (
                    "stock",
                    models.IntegerField(
                        default=0,
                        validators=[
                            django.core.validators.MinValueValidator(0, message="Stock must not be negative")
                        ],
                        verbose_name="stock",
                    ),
                ),
                ("specifications", models.JSONField(blank=True, default=dict, verbose_name="specifications")),
                ("image_url", models.CharField(blank=True, max_length=500, verbose_name="image URL")),
                ("is_published", models.BooleanField(db_index=True, default=True, verbose_name="published")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "keywords",
                    taggit.managers.TaggableManager(
                        blank=True,
                        help_text="Tags for search. Comma separated.",
                        through="taggit.TaggedItem",
                        to="taggit.Tag",
                        verbose_name="keywords",
                    ),
                ),
            ],
            options={
                "verbose_name": "catalog item",
                "verbose_name_plural": "catalog items",
                "ordering": ["name"],
                "indexes": [models.Index(fields=["category", "is_published"], name="partsman_ca_categor_5b1d0e_idx")],
            },
        ),
        migrations.CreateModel(
            name="HistoricalCatalogItem",
            fields=[
                ("id", models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name="ID")),
                ("uuid", models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name="UUID")),
                ("name", models.CharField(max_length=200, verbose_name="name")),
                (
                    "category",
                    models.CharField(
                        blank=True,
                        db_index=True,
                        help_text="cpu, gpu, ram, gaming-pc, etc.",
                        max_length=50,
                        verbose_name="category",
                    ),
                ),
                ("description", models.TextField(blank=True, verbose_name="description")),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0"),
                        max_digits=10,
                        validators=[
                            django.core.validators.MinValueValidator(0, message="Price must not be negative")
                        ],
                        verbose_name="price",
                    ),
                ),
                (
                    "stock",
                    models.IntegerField(
                        default=0,
                        validators=[
                            django.core.validators.MinValueValidator(0, message="Stock must not be negative")
                        ],
                        verbose_name="stock",
                    ),
                ),
                ("specifications", models.JSONField(blank=True, default=dict, verbose_name="specifications")),
                ("image_url", models.CharField(blank=True, max_length=500, verbose_name="image URL")),
                ("is_published", models.BooleanField(db_index=True, default=True, verbose_name="published")),
                ("created_at", models.DateTimeField(blank=True, editable=False, verbose_name="created at")),
                ("updated_at", models.DateTimeField(blank=True, editable=False, verbose_name="updated at")),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                (
                    "history_type",
                    models.CharField(
                        choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")],
                        max_length=1,
                    ),
                ),
                (
                    "history_user",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "historical catalog item",
                "verbose_name_plural": "historical catalog items",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]

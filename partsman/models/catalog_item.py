"""CatalogItem model."""

import uuid as uuid_lib
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords
from taggit.managers import TaggableManager

from partsman.exceptions import ERROR_MESSAGES


class CatalogItemQuerySet(models.QuerySet):
    """Custom QuerySet for CatalogItem."""

    def published(self):
        return self.filter(is_published=True)

    def in_stock(self):
        return self.filter(stock__gt=0)

    def in_category(self, category: str | None):
        """Coarse category pre-filter: `pc` matches `gaming-pc`, `office-pc`..."""
        if not category:
            return self
        return self.filter(category__icontains=category)


class CatalogItem(models.Model):
    """Component, peripheral or ready-made PC offered in the shop."""

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True, verbose_name=_("UUID"))

    name = models.CharField(_("name"), max_length=200)
    category = models.CharField(
        _("category"),
        max_length=50,
        blank=True,
        db_index=True,
        help_text=_("cpu, gpu, ram, gaming-pc, etc."),
    )
    description = models.TextField(_("description"), blank=True)

    price = models.DecimalField(
        _("price"),
        max_digits=10,
        decimal_places=2,
        default=Decimal("0"),
        validators=[MinValueValidator(0, message=ERROR_MESSAGES["INVALID_PRICE"])],
    )
    stock = models.IntegerField(
        _("stock"),
        default=0,
        validators=[MinValueValidator(0, message=ERROR_MESSAGES["INVALID_STOCK"])],
    )

    # Free-form spec key -> value; keys are not standardized across items
    specifications = models.JSONField(_("specifications"), default=dict, blank=True)

    image_url = models.CharField(_("image URL"), max_length=500, blank=True)

    keywords = TaggableManager(
        blank=True,
        verbose_name=_("keywords"),
        help_text=_("Tags for search. Comma separated."),
    )

    is_published = models.BooleanField(_("published"), default=True, db_index=True)

    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    history = HistoricalRecords()

    objects = CatalogItemQuerySet.as_manager()

    class Meta:
        verbose_name = _("catalog item")
        verbose_name_plural = _("catalog items")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["category", "is_published"]),
        ]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        is_new = self._state.adding
        old_price = None
        if not is_new:
            old_price = (
                type(self).objects.filter(pk=self.pk).values_list("price", flat=True).first()
            )
        super().save(*args, **kwargs)

        from partsman.signals import item_created, price_changed

        if is_new:
            item_created.send(sender=self.__class__, instance=self, item_id=str(self.uuid))
        elif old_price is not None and Decimal(old_price) != Decimal(self.price):
            price_changed.send(
                sender=self.__class__,
                instance=self,
                item_id=str(self.uuid),
                old_price=Decimal(old_price),
                new_price=Decimal(self.price),
            )

    @property
    def is_in_stock(self) -> bool:
        return self.stock > 0

    def to_info(self):
        """Immutable record handed to the query engine."""
        from partsman.protocols import ItemInfo
        from partsman.specifications import parse_specifications

        return ItemInfo(
            id=str(self.uuid),
            name=self.name,
            category=self.category or None,
            description=self.description,
            price=Decimal(self.price),
            specifications=parse_specifications(self.specifications),
            stock=self.stock,
            image_url=self.image_url or None,
        )

"""Insert the static demo catalog. Safe to run repeatedly."""

import logging

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from partsman.exceptions import CatalogError
from partsman.models import CatalogItem
from partsman.seeds import select_seed_items

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Seed the catalog with demo components and ready-made PCs."

    def add_arguments(self, parser):
        parser.add_argument(
            "--only",
            action="append",
            default=[],
            metavar="CATEGORY",
            help="Seed only this category (repeatable).",
        )

    def handle(self, *args, **options):
        try:
            records = select_seed_items(options["only"])
        except CatalogError as e:
            raise CommandError(f"{e.message}: {', '.join(e.data['categories'])}") from e

        created = updated = 0
        with transaction.atomic():
            for data in records:
                defaults = {key: value for key, value in data.items() if key not in ("name", "category", "keywords")}
                item, is_new = CatalogItem.objects.update_or_create(
                    name=data["name"],
                    category=data["category"],
                    defaults=defaults,
                )
                item.keywords.set(data.get("keywords", []))
                if is_new:
                    created += 1
                else:
                    updated += 1

        logger.info("Seeded catalog: %d created, %d updated", created, updated)
        self.stdout.write(self.style.SUCCESS(f"Seeded catalog: {created} created, {updated} updated"))

"""
Partsman signals.

Signals:
    item_created:
        Sent after a new CatalogItem is saved for the first time.

        Kwargs:
            sender: CatalogItem class
            instance: The CatalogItem instance that was created
            item_id: str, the item UUID

    price_changed:
        Sent after a save that changes a CatalogItem's price.

        Kwargs:
            sender: CatalogItem class
            instance: The CatalogItem instance
            item_id: str, the item UUID
            old_price: Decimal, previous price
            new_price: Decimal, new price

        Example handler::

            from partsman.signals import price_changed

            def on_price_changed(sender, instance, item_id, old_price, new_price, **kwargs):
                logger.info("Price for %s changed: %s -> %s", instance.name, old_price, new_price)

            price_changed.connect(on_price_changed)
"""

from django.dispatch import Signal

item_created = Signal()
price_changed = Signal()

"""Django signals that drive the live order feed.

Any save or delete of an order republishes its collection, so every
subscriber receives a full replacement snapshot.
"""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from orders.models import Order
from orders.stores.hub import order_changes


@receiver([post_save, post_delete], sender=Order)
def publish_order_change(sender, instance, **kwargs):
    """Notify live subscribers when an order is saved or deleted."""
    order_changes.publish(instance.collection)

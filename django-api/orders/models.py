"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.db import models


class Order(models.Model):
    """Persistence model for submitted orders.

    Quantities are stored as JSON documents so records keep the size and
    garment keys they were submitted with, whatever the catalog says today.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    collection = models.CharField(max_length=255)
    submitter_name = models.CharField(max_length=255)
    region = models.CharField(max_length=255)
    garment_quantities = models.JSONField(default=dict)
    sleeve_counts = models.JSONField(default=dict)
    accessory_quantities = models.JSONField(default=dict)
    total_items = models.PositiveIntegerField()
    total_price = models.PositiveBigIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["collection", "-created_at"], name="orders_collection_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.submitter_name} ({self.region}) - {self.total_price}"

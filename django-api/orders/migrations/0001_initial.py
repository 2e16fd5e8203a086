import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("collection", models.CharField(max_length=255)),
                ("submitter_name", models.CharField(max_length=255)),
                ("region", models.CharField(max_length=255)),
                ("garment_quantities", models.JSONField(default=dict)),
                ("sleeve_counts", models.JSONField(default=dict)),
                ("accessory_quantities", models.JSONField(default=dict)),
                ("total_items", models.PositiveIntegerField()),
                ("total_price", models.PositiveBigIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["collection", "-created_at"], name="orders_collection_created_idx"),
                ],
            },
        ),
    ]

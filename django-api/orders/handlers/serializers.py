"""Serializers for transforming requests into drafts and domain models into API responses."""

from rest_framework import serializers

from orders.domain import Accessory, Catalog, GarmentType, OrderBuilder, SleeveCounts, SleeveStyle
from orders.domain.value_objects import clamp_quantity

# Upper bound for any single quantity or sleeve count in a payload.
MAX_QUANTITY = 10_000


def quantity_field():
    return serializers.IntegerField(max_value=MAX_QUANTITY)


class DraftSerializer(serializers.Serializer):
    """Order form payload, in the same field layout as stored records."""

    submitterName = serializers.CharField(allow_blank=True, default="", max_length=255)
    region = serializers.CharField(allow_blank=True, default="", max_length=255)
    garmentQuantities = serializers.DictField(child=serializers.DictField(child=quantity_field()), default=dict)
    sleeveCounts = serializers.DictField(child=serializers.DictField(child=quantity_field()), default=dict)
    accessoryQuantities = serializers.DictField(child=quantity_field(), default=dict)

    def _check_names(self, value, enum, label):
        unknown = [name for name in value if name not in {member.value for member in enum}]
        if unknown:
            raise serializers.ValidationError(f"Unknown {label}: {', '.join(sorted(unknown))}")
        return value

    def validate_garmentQuantities(self, value):
        return self._check_names(value, GarmentType, "garment")

    def validate_sleeveCounts(self, value):
        self._check_names(value, GarmentType, "garment")
        for counts in value.values():
            self._check_names(counts, SleeveStyle, "sleeve style")
        return value

    def validate_accessoryQuantities(self, value):
        return self._check_names(value, Accessory, "accessory")

    def to_builder(self, catalog: Catalog) -> OrderBuilder:
        """Load the validated payload into a fresh builder.

        Sleeve counts are copied as sent rather than through
        ``set_sleeve_count`` so an over-limit payload is reported by
        ``validate_for_submit`` instead of being silently dropped.

        Raises:
            UnknownSizeError: If a size is not offered for its garment.
        """
        data = self.validated_data
        builder = OrderBuilder(catalog)
        builder.set_identity(data["submitterName"], data["region"])
        for garment_name, sizes in data["garmentQuantities"].items():
            garment = GarmentType(garment_name)
            for size_id, qty in sizes.items():
                builder.set_size_quantity(garment, size_id, qty)
        for garment_name, counts in data["sleeveCounts"].items():
            builder.draft.sleeve_counts[GarmentType(garment_name)] = SleeveCounts(
                long=clamp_quantity(counts.get(SleeveStyle.LONG.value, 0)),
                ruffled=clamp_quantity(counts.get(SleeveStyle.RUFFLED.value, 0)),
            )
        for accessory_name, qty in data["accessoryQuantities"].items():
            builder.set_accessory_quantity(Accessory(accessory_name), qty)
        return builder


class TotalsSerializer(serializers.Serializer):
    """Serializer for draft Totals."""

    totalPolo = serializers.IntegerField(source="total_polo")
    totalTee = serializers.IntegerField(source="total_tee")
    totalItems = serializers.IntegerField(source="total_items")
    totalPrice = serializers.IntegerField(source="total_price")


class OrderRecordSerializer(serializers.Serializer):
    """Serializer for OrderRecord domain model."""

    id = serializers.CharField()
    submitterName = serializers.CharField(source="submitter_name")
    region = serializers.CharField()
    garmentQuantities = serializers.DictField(source="garment_quantities")
    sleeveCounts = serializers.DictField(source="sleeve_counts")
    accessoryQuantities = serializers.DictField(source="accessory_quantities")
    totalItems = serializers.IntegerField(source="total_items")
    totalPrice = serializers.IntegerField(source="total_price")
    createdAt = serializers.DateTimeField(source="created_at")


class FeedSummarySerializer(serializers.Serializer):
    """Serializer for FeedSummary."""

    orderCount = serializers.IntegerField(source="order_count")
    totalItems = serializers.IntegerField(source="total_items")
    totalRevenue = serializers.IntegerField(source="total_revenue")
    garmentSizes = serializers.DictField(source="garment_sizes")
    sleeves = serializers.DictField()
    accessories = serializers.DictField()


class AdminFeedSerializer(serializers.Serializer):
    """Serializer for the AdminOrderFeed view state."""

    state = serializers.CharField(source="state.value")
    error = serializers.CharField(allow_null=True)
    pendingDelete = serializers.CharField(source="pending_delete", allow_null=True)
    orders = OrderRecordSerializer(source="records", many=True)
    summary = serializers.SerializerMethodField()

    def get_summary(self, feed):
        return FeedSummarySerializer(feed.summary()).data


def catalog_payload(catalog: Catalog) -> dict:
    return {
        "garments": {
            garment.value: {
                "basePrice": catalog.base_price(garment),
                "sizes": [{"id": s.id, "surcharge": s.surcharge} for s in catalog.sizes_for(garment)],
            }
            for garment in GarmentType
        },
        "sleeves": {style.value: catalog.sleeve_surcharge(style) for style in SleeveStyle},
        "accessories": {a.value: catalog.accessory_price(a) for a in Accessory},
    }

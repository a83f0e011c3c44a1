"""Order DRF serializers for API output.

Input is validated by ``CreateOrderDTO``; these serializers render
stored order documents with the referenced product expanded.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.serializers import ProductSerializer


class OrderSerializer(serializers.Serializer):
    """Read serializer for an order document."""

    id = serializers.CharField(source="_id", read_only=True)
    product_id = serializers.CharField(read_only=True)
    product = ProductSerializer(read_only=True, allow_null=True)
    quantity = serializers.IntegerField(read_only=True)
    notes = serializers.CharField(read_only=True, required=False)
    created_at = serializers.DateTimeField(read_only=True, required=False)

"""Product DRF serializers for API output.

Input is validated by the Pydantic DTOs in ``dtos.py``; these
serializers only render stored documents (plain dicts) and describe
the resource for the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Read serializer for a product document."""

    id = serializers.CharField(source="_id", read_only=True)
    name = serializers.CharField()
    price = serializers.FloatField()
    description = serializers.CharField(required=False, default="")
    category = serializers.CharField(required=False, default="")
    created_at = serializers.DateTimeField(read_only=True, required=False)
    updated_at = serializers.DateTimeField(read_only=True, required=False)

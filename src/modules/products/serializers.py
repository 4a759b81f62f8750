"""Product DRF serializers.

Request validation and responses go through the pydantic DTOs in
``dtos.py``; these serializers describe the same shapes for the OpenAPI
schema generated by drf-spectacular.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(min_length=3, max_length=80)
    description = serializers.CharField(min_length=10)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0.01"), required=False, allow_null=True
    )
    img_url = serializers.CharField(max_length=255, required=False, allow_null=True)
    rating = serializers.FloatField(required=False, allow_null=True)
    specifications = serializers.CharField(required=False, allow_null=True)


class ProductPageSerializer(serializers.Serializer):
    content = ProductSerializer(many=True)
    number = serializers.IntegerField()
    size = serializers.IntegerField()
    offset = serializers.IntegerField()
    total_elements = serializers.IntegerField()
    total_pages = serializers.IntegerField()


class CategorySerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField()

"""Order DRF serializers.

Responses are built from the pydantic DTOs in ``dtos.py``; these
serializers describe the same shapes for the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.constants import OrderStatus


class UserSummarySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField()
    birth_date = serializers.DateField(allow_null=True)


class OrderItemSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    product_name = serializers.CharField()
    quantity = serializers.IntegerField(min_value=1)
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)


class PaymentSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    moment = serializers.DateTimeField()


class OrderSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    moment = serializers.DateTimeField()
    status = serializers.ChoiceField(choices=OrderStatus.choices)
    client = UserSummarySerializer()
    items = OrderItemSerializer(many=True)
    payment = PaymentSerializer(allow_null=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2)

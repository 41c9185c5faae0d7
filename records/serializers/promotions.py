from rest_framework import serializers

from .base import LenientDateField, StrictSerializer


class PromotionCreateSerializer(StrictSerializer):
    ignored_fields = ('id', 'mcr_number')

    previous_title = serializers.CharField(max_length=255)
    new_title = serializers.CharField(max_length=255)
    promotion_date = LenientDateField()


class PromotionKeySerializer(StrictSerializer):
    """``new_title`` selects the rows; ``promotion_date`` narrows them."""
    new_title = serializers.CharField(max_length=255)
    promotion_date = LenientDateField(required=False, allow_null=True)

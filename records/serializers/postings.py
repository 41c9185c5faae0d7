from rest_framework import serializers

from .base import StrictSerializer


class PostingKeySerializer(StrictSerializer):
    mcr_number = serializers.CharField(max_length=20)
    school_name = serializers.CharField(max_length=255)
    academic_year = serializers.CharField(max_length=20)
    posting_number = serializers.IntegerField(min_value=1)


class PostingCreateSerializer(PostingKeySerializer):
    total_training_hour = serializers.FloatField(min_value=0)
    rating = serializers.FloatField(min_value=0)

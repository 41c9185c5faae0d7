from rest_framework import serializers

from .base import LenientDateField, LenientFloatField, StrictSerializer


class ContractCreateSerializer(StrictSerializer):
    aliases = {
        'contract_start_date': 'start_date',
        'contract_end_date': 'end_date',
    }
    # The client echoes these back from a fetched contract
    ignored_fields = ('id', 'mcr_number', 'total_training_hours')

    school_name = serializers.CharField(max_length=255)
    start_date = LenientDateField()
    end_date = LenientDateField()
    status = serializers.CharField(max_length=50)
    prev_title = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    new_title = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    training_hours = LenientFloatField(required=False, allow_null=True, min_value=0)
    training_hours_2022 = LenientFloatField(required=False, allow_null=True, min_value=0)
    training_hours_2023 = LenientFloatField(required=False, allow_null=True, min_value=0)
    training_hours_2024 = LenientFloatField(required=False, allow_null=True, min_value=0)

    def validate(self, attrs):
        if attrs['end_date'] < attrs['start_date']:
            raise serializers.ValidationError({'end_date': ['Must not be before start_date.']})
        return attrs


class ContractKeySerializer(StrictSerializer):
    """Natural key of the contract rows to delete."""
    aliases = {'contract_start_date': 'start_date'}

    school_name = serializers.CharField(max_length=255)
    status = serializers.CharField(max_length=50)
    start_date = LenientDateField()

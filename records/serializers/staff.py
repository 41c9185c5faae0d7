import bleach
from rest_framework import serializers

from .base import LenientDateField, LenientFloatField, StrictSerializer

# Columns the client may send back unchanged; never written from input
AUDIT_FIELDS = (
    'created_by', 'created_at', 'updated_by', 'updated_at',
    'deleted', 'deleted_by', 'deleted_at',
)


def _clean_text(v: str) -> str:
    return bleach.clean((v or '').strip(), strip=True)


class StaffFieldsSerializer(StrictSerializer):
    """The mutable columns of a staff record."""
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    department = serializers.CharField(max_length=100)
    appointment = serializers.CharField(max_length=100)
    email = serializers.EmailField(max_length=255)
    teaching_training_hours = LenientFloatField(allow_null=True, default=None, min_value=0)
    start_date = LenientDateField(allow_null=True, default=None)
    end_date = LenientDateField(allow_null=True, default=None)
    renewal_start_date = LenientDateField(allow_null=True, default=None)
    renewal_end_date = LenientDateField(allow_null=True, default=None)

    def validate_first_name(self, v):
        return self._non_blank(_clean_text(v))

    def validate_last_name(self, v):
        return self._non_blank(_clean_text(v))

    def validate_department(self, v):
        return self._non_blank(v.strip())

    def validate_appointment(self, v):
        return self._non_blank(v.strip())

    def _non_blank(self, v):
        if not v:
            raise serializers.ValidationError('This field may not be blank.', code='blank')
        return v

    def validate(self, attrs):
        for start, end in (('start_date', 'end_date'), ('renewal_start_date', 'renewal_end_date')):
            if attrs.get(start) and attrs.get(end) and attrs[end] < attrs[start]:
                raise serializers.ValidationError({end: ['Must not be before %s.' % start]})
        return attrs


class StaffCreateSerializer(StaffFieldsSerializer):
    mcr_number = serializers.CharField(max_length=20)
    ignored_fields = AUDIT_FIELDS


class StaffUpdateSerializer(StaffFieldsSerializer):
    """Full overwrite of the mutable columns; the key comes from the URL."""
    ignored_fields = ('mcr_number',) + AUDIT_FIELDS

from django.utils import timezone
from django.utils.dateparse import parse_datetime
from rest_framework import serializers

MISSING_CODES = ('required', 'blank', 'null')


class StrictSerializer(serializers.Serializer):
    """Input struct that rejects fields it does not declare.

    ``aliases`` maps alternative client spellings onto declared fields;
    ``ignored_fields`` are accepted and dropped (read-only columns the
    client echoes back).
    """
    aliases: dict = {}
    ignored_fields: tuple = ()

    def to_internal_value(self, data):
        if hasattr(data, 'keys'):
            known = set(self.fields) | set(self.aliases) | set(self.ignored_fields)
            unknown = sorted(k for k in data.keys() if k not in known)
            if unknown:
                raise serializers.ValidationError({k: ['Unknown field.'] for k in unknown})
            data = {
                self.aliases.get(k, k): data[k]
                for k in data.keys()
                if k not in self.ignored_fields
            }
        return super().to_internal_value(data)

    def only_missing_fields(self) -> bool:
        """True when validation failed only because something was left out."""
        return bool(self.errors) and all(
            getattr(e, 'code', None) in MISSING_CODES
            for errors in self.errors.values() for e in errors
        )


class LenientDateField(serializers.DateField):
    """Blank means null; a datetime keeps its local calendar day.

    ``2024-01-31T16:00:00.000Z`` is 1 February in Singapore and is stored
    as such; naive datetimes keep their own date.
    """

    def validate_empty_values(self, data):
        if data == '' and self.allow_null:
            return (True, None)
        return super().validate_empty_values(data)

    def to_internal_value(self, value):
        if isinstance(value, str) and 'T' in value:
            try:
                moment = parse_datetime(value)
            except ValueError:
                moment = None
            if moment is None:
                self.fail('invalid', format='YYYY-MM-DD')
            if timezone.is_aware(moment):
                moment = timezone.localtime(moment)
            return moment.date()
        return super().to_internal_value(value)


class LenientFloatField(serializers.FloatField):
    def validate_empty_values(self, data):
        if data == '' and self.allow_null:
            return (True, None)
        return super().validate_empty_values(data)

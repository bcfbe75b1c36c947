from rest_framework import serializers

from clinic.models import Patient
from .common import AuditFieldsMixin, clean_text


class PatientSerializer(AuditFieldsMixin, serializers.ModelSerializer):
    class Meta:
        model = Patient
        fields = ['id', 'name', 'email', 'phone', 'dni', 'status', 'createdAt', 'updatedAt']
        read_only_fields = ['id', 'status']
        # uniqueness of email/dni is enforced by the database
        extra_kwargs = {
            'email': {'validators': []},
            'dni': {'validators': [], 'min_value': 1},
            'phone': {'min_value': 1},
        }

    def validate_name(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('name must not be blank')
        return v


class PatientUpdateSerializer(PatientSerializer):
    """Partial-update payload: ``id`` plus any subset of the fields."""
    id = serializers.IntegerField(required=False)

    class Meta(PatientSerializer.Meta):
        read_only_fields = ['status']

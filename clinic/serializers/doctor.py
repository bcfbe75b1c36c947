from rest_framework import serializers

from clinic.models import Doctor
from .common import AuditFieldsMixin, clean_text


class DoctorSerializer(AuditFieldsMixin, serializers.ModelSerializer):
    class Meta:
        model = Doctor
        fields = ['id', 'name', 'specialty', 'status', 'createdAt', 'updatedAt']
        read_only_fields = ['id', 'status']

    def validate_name(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('name must not be blank')
        return v

    def validate_specialty(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('specialty must not be blank')
        return v


class DoctorUpdateSerializer(DoctorSerializer):
    id = serializers.IntegerField(required=False)

    class Meta(DoctorSerializer.Meta):
        read_only_fields = ['status']

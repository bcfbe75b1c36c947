from rest_framework import serializers

from clinic.models import Appointment
from .common import AuditFieldsMixin, clean_text


class AppointmentSerializer(AuditFieldsMixin, serializers.ModelSerializer):
    # Plain ids: a dangling reference is rejected by the database FK constraint
    patientId = serializers.IntegerField(source='patient_id', min_value=1)
    doctorId = serializers.IntegerField(source='doctor_id', min_value=1)
    patientName = serializers.CharField(source='patient.name', read_only=True)
    doctorName = serializers.CharField(source='doctor.name', read_only=True)

    class Meta:
        model = Appointment
        fields = [
            'id', 'date', 'reason', 'patientId', 'doctorId', 'patientName', 'doctorName',
            'status', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ['id', 'status']

    def validate_reason(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('reason must not be blank')
        return v


class AppointmentUpdateSerializer(AppointmentSerializer):
    id = serializers.IntegerField(required=False)

    class Meta(AppointmentSerializer.Meta):
        read_only_fields = ['status']

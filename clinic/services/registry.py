"""
Entity descriptors.

Each descriptor names one entity and the pieces the generic service and
views need: its model, its serializers and the optional field checks
run through :class:`clinic.helpers.GenericHelpers` before a write.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from clinic.models import Appointment, Doctor, Patient
from clinic.serializers.appointment import AppointmentSerializer, AppointmentUpdateSerializer
from clinic.serializers.doctor import DoctorSerializer, DoctorUpdateSerializer
from clinic.serializers.patient import PatientSerializer, PatientUpdateSerializer

FieldChecks = Callable[[Any, dict], dict]


@dataclass(frozen=True)
class EntityDescriptor:
    name: str  # URL segment, e.g. 'Patient'
    label: str  # used in response messages
    model: type
    serializer: type
    update_serializer: type
    select_related: tuple[str, ...] = ()
    field_checks: Optional[FieldChecks] = None


def patient_field_checks(helpers, data: dict) -> dict:
    errors = {}
    if 'phone' in data and not helpers.is_valid_phone_number(data['phone']):
        errors['phone'] = 'invalid phone number'
    if 'dni' in data and not helpers.is_valid_identity_number(data['dni']):
        errors['dni'] = 'invalid identity number'
    return errors


PATIENT = EntityDescriptor(
    name='Patient',
    label='Patient',
    model=Patient,
    serializer=PatientSerializer,
    update_serializer=PatientUpdateSerializer,
    field_checks=patient_field_checks,
)

DOCTOR = EntityDescriptor(
    name='Doctor',
    label='Doctor',
    model=Doctor,
    serializer=DoctorSerializer,
    update_serializer=DoctorUpdateSerializer,
)

APPOINTMENT = EntityDescriptor(
    name='Appointment',
    label='Appointment',
    model=Appointment,
    serializer=AppointmentSerializer,
    update_serializer=AppointmentUpdateSerializer,
    select_related=('patient', 'doctor'),
)

ENTITIES: tuple[EntityDescriptor, ...] = (PATIENT, DOCTOR, APPOINTMENT)

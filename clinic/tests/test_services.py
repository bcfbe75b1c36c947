import datetime as dt

import pytest
from django.db import IntegrityError
from django.db.models import ProtectedError
from django.utils import timezone

from clinic.exceptions import EntityNotFound, InvalidInput
from clinic.models import Appointment, Doctor, Patient
from clinic.services import EntityService, Repository
from clinic.services.registry import APPOINTMENT, DOCTOR, PATIENT

pytestmark = pytest.mark.django_db


@pytest.fixture
def patient():
    return Patient.objects.create(name='Ana', email='ana@x.com', phone=5551234, dni=12345678)


@pytest.fixture
def doctor():
    return Doctor.objects.create(name='Dr. House', specialty='Diagnostics')


def test_create_sets_audit_fields_and_forces_active():
    obj = EntityService(DOCTOR).create({'name': 'Dr. Grey', 'specialty': 'Surgery', 'status': False})
    assert obj.status is True
    assert obj.created_at is not None
    assert obj.created_at == obj.updated_at


def test_set_active_round_trip_only_touches_status(patient):
    repo = Repository(Patient)
    before = Patient.objects.get(pk=patient.pk)

    assert repo.set_active(patient.pk, False) is True
    patient.refresh_from_db()
    assert patient.status is False

    assert repo.set_active(patient.pk, True) is True
    patient.refresh_from_db()
    assert patient.status is True
    for field in ('name', 'email', 'phone', 'dni', 'created_at'):
        assert getattr(patient, field) == getattr(before, field)
    assert patient.updated_at >= before.updated_at


def test_set_active_unknown_id_returns_false():
    assert Repository(Doctor).set_active(999, False) is False


def test_update_partial_copies_only_provided_fields(patient):
    assert Repository(Patient).update_partial(patient.pk, {'name': 'Ana María'}) is True
    patient.refresh_from_db()
    assert patient.name == 'Ana María'
    assert patient.email == 'ana@x.com'
    assert patient.dni == 12345678
    assert patient.status is True


def test_update_partial_without_changes_moves_only_updated_at(doctor):
    before = Doctor.objects.get(pk=doctor.pk)
    assert Repository(Doctor).update_partial(doctor.pk, {}) is True
    doctor.refresh_from_db()
    assert (doctor.name, doctor.specialty, doctor.created_at) == (before.name, before.specialty, before.created_at)
    assert doctor.updated_at >= before.updated_at


def test_update_partial_ignores_audit_columns(doctor):
    created = doctor.created_at
    Repository(Doctor).update_partial(doctor.pk, {'status': False, 'created_at': timezone.now() + dt.timedelta(days=1)})
    doctor.refresh_from_db()
    assert doctor.status is True
    assert doctor.created_at == created


def test_update_partial_unknown_id_returns_false():
    assert EntityService(DOCTOR).update_partial({'id': 999, 'name': 'Dr. X'}) is False


@pytest.mark.parametrize('payload', [{'id': 0, 'name': 'X'}, {'id': -3}, {'name': 'no id'}, {}, None])
def test_update_partial_rejects_bad_id_without_queries(payload, django_assert_num_queries):
    service = EntityService(PATIENT)
    with django_assert_num_queries(0):
        with pytest.raises(InvalidInput):
            service.update_partial(payload)


def test_delete_logic_unknown_id_raises_not_found(doctor):
    with pytest.raises(EntityNotFound) as exc:
        EntityService(DOCTOR).delete_logic({'id': 999, 'status': False})
    assert exc.value.pk == 999
    doctor.refresh_from_db()
    assert doctor.status is True


@pytest.mark.parametrize('payload', [None, {}, {'id': 0, 'status': False}])
def test_delete_logic_rejects_invalid_payload(payload):
    with pytest.raises(InvalidInput):
        EntityService(PATIENT).delete_logic(payload)


def test_delete_logic_deactivates_and_reactivates(patient):
    service = EntityService(PATIENT)
    assert service.delete_logic({'id': patient.pk, 'status': False}) is True
    assert Patient.objects.get(pk=patient.pk).status is False
    assert service.delete_logic({'id': patient.pk, 'status': True}) is True
    assert Patient.objects.get(pk=patient.pk).status is True


def test_patient_field_checks_use_helpers():
    with pytest.raises(InvalidInput) as exc:
        EntityService(PATIENT).create({'name': 'Bad', 'email': 'bad@x.com', 'phone': 12, 'dni': 99})
    assert 'phone' in exc.value.detail
    assert 'dni' in exc.value.detail
    assert not Patient.objects.filter(email='bad@x.com').exists()


def test_injected_helpers_are_used(patient):
    class RejectAll:
        def is_valid_phone_number(self, value):
            return False

        def is_valid_identity_number(self, value):
            return True

    service = EntityService(PATIENT, helpers=RejectAll())
    with pytest.raises(InvalidInput):
        service.update_partial({'id': patient.pk, 'phone': 5550000})


def test_full_update_keeps_created_at(doctor):
    service = EntityService(DOCTOR)
    created, updated = doctor.created_at, doctor.updated_at
    obj = service.update(doctor.pk, {'name': 'Dr. Cuddy', 'specialty': 'Endocrinology'})
    obj.refresh_from_db()
    assert obj.name == 'Dr. Cuddy'
    assert obj.created_at == created
    assert obj.updated_at >= updated


def test_retrieve_and_delete_unknown_raise_not_found():
    service = EntityService(DOCTOR)
    with pytest.raises(EntityNotFound):
        service.retrieve(42)
    with pytest.raises(EntityNotFound):
        service.delete(42)
    with pytest.raises(InvalidInput):
        service.retrieve(0)


def test_physical_delete_blocked_while_appointments_reference_row(patient, doctor):
    Appointment.objects.create(date=timezone.now(), reason='Check-up', patient=patient, doctor=doctor)
    with pytest.raises(ProtectedError):
        EntityService(PATIENT).delete(patient.pk)
    assert Patient.objects.filter(pk=patient.pk).exists()


def test_duplicate_email_or_dni_violates_constraint(patient):
    repo = Repository(Patient)
    with pytest.raises(IntegrityError):
        repo.create(name='Other', email='ana@x.com', phone=5559999, dni=87654321)
    with pytest.raises(IntegrityError):
        repo.create(name='Other', email='other@x.com', phone=5559999, dni=12345678)
    assert Patient.objects.count() == 1


def test_list_filters_by_status_and_paginates(doctor):
    service = EntityService(DOCTOR)
    for i in range(4):
        service.create({'name': f'Dr. {i}', 'specialty': 'General'})
    Repository(Doctor).set_active(doctor.pk, False)

    rows, total = service.list(active=True)
    assert total == 4
    assert doctor.pk not in [r.pk for r in rows]

    rows, total = service.list(page=2, page_size=2)
    assert total == 5
    assert [r.pk for r in rows] == list(Doctor.objects.order_by('id').values_list('pk', flat=True)[2:4])


def test_appointment_service_loads_references(patient, doctor):
    service = EntityService(APPOINTMENT)
    appt = service.create({'date': timezone.now(), 'reason': 'Fever', 'patient_id': patient.pk, 'doctor_id': doctor.pk})
    loaded = service.retrieve(appt.pk)
    assert loaded.patient.name == 'Ana'
    assert loaded.doctor.name == 'Dr. House'

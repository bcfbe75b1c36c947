"""
Database models for the medical scheduling backend.

Every entity shares the audit columns declared on :class:`BaseEntity`:
an integer identity, creation and modification timestamps, and a
``status`` flag used for logical deletion.  Appointments reference a
patient and a doctor; both references block physical deletion of the
referenced row.
"""
from __future__ import annotations

from django.db import models
from django.utils import timezone


class BaseEntity(models.Model):
    """Abstract base carrying the audit fields.

    ``created_at`` is written once on insert and ``updated_at`` is
    refreshed on every save, including saves restricted with
    ``update_fields``.  Both get the same instant on insert.
    """
    id = models.AutoField(primary_key=True)
    created_at = models.DateTimeField(editable=False)
    updated_at = models.DateTimeField(editable=False)
    # Active flag; indexed for filtering active rows
    status = models.BooleanField(default=True, db_index=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        now = timezone.now()
        if self._state.adding:
            self.created_at = now
        self.updated_at = now
        update_fields = kwargs.get('update_fields')
        if update_fields is not None:
            fields = [f for f in update_fields if f != 'created_at']
            if 'updated_at' not in fields:
                fields.append('updated_at')
            kwargs['update_fields'] = fields
        super().save(*args, **kwargs)


class Patient(BaseEntity):
    name = models.CharField(max_length=200, db_index=True)
    email = models.EmailField(max_length=200, unique=True)
    phone = models.BigIntegerField()
    dni = models.BigIntegerField(unique=True, help_text="National identity number")

    class Meta:
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.name} ({self.dni})"


class Doctor(BaseEntity):
    name = models.CharField(max_length=200, db_index=True)
    specialty = models.CharField(max_length=100, db_index=True)

    class Meta:
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.name} - {self.specialty}"


class Appointment(BaseEntity):
    date = models.DateTimeField(db_index=True)
    reason = models.CharField(max_length=500)
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name='appointments')
    doctor = models.ForeignKey(Doctor, on_delete=models.PROTECT, related_name='appointments')

    class Meta:
        ordering = ['id']
        indexes = [
            models.Index(fields=['doctor', 'date'], name='appointment_doctor_date_idx'),
        ]

    def __str__(self) -> str:
        return f"Appointment #{self.id} d={self.doctor_id} p={self.patient_id} @ {self.date:%F %T}"

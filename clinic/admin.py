"""
Django admin registrations for the clinic models.

Audit columns are shown read-only; the activate/deactivate actions go
through the same repository used by the REST API so ``updated_at`` is
refreshed exactly as for ``delete-logic``.
"""
from django.contrib import admin

from .models import Appointment, Doctor, Patient
from .services.repository import Repository


def _set_status(queryset, status: bool) -> int:
    repo = Repository(queryset.model)
    return sum(1 for pk in queryset.values_list('pk', flat=True) if repo.set_active(pk, status))


@admin.action(description='Mark selected rows active')
def mark_active(modeladmin, request, queryset):
    count = _set_status(queryset, True)
    modeladmin.message_user(request, f'{count} row(s) activated')


@admin.action(description='Mark selected rows inactive')
def mark_inactive(modeladmin, request, queryset):
    count = _set_status(queryset, False)
    modeladmin.message_user(request, f'{count} row(s) deactivated')


class AuditedAdmin(admin.ModelAdmin):
    readonly_fields = ('created_at', 'updated_at')
    list_filter = ('status',)
    actions = [mark_active, mark_inactive]


@admin.register(Patient)
class PatientAdmin(AuditedAdmin):
    list_display = ('id', 'name', 'email', 'phone', 'dni', 'status', 'updated_at')
    search_fields = ('name', 'email', 'dni')


@admin.register(Doctor)
class DoctorAdmin(AuditedAdmin):
    list_display = ('id', 'name', 'specialty', 'status', 'updated_at')
    list_filter = ('status', 'specialty')
    search_fields = ('name', 'specialty')


@admin.register(Appointment)
class AppointmentAdmin(AuditedAdmin):
    list_display = ('id', 'date', 'patient', 'doctor', 'reason', 'status')
    list_filter = ('status', 'doctor')
    list_select_related = ('patient', 'doctor')
    search_fields = ('reason', 'patient__name', 'doctor__name')
    date_hierarchy = 'date'

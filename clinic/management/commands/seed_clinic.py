"""
Management command to populate the database with sample data.
"""
import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from clinic.models import Appointment, Doctor, Patient


class Command(BaseCommand):
    help = 'Populate database with sample doctors, patients and appointments'

    def add_arguments(self, parser):
        parser.add_argument('--flush', action='store_true', help='Delete existing clinic rows first')
        parser.add_argument('--appointments', type=int, default=12, help='Number of appointments to create')
        parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducible data')

    def handle(self, *args, **options):
        if options['seed'] is not None:
            random.seed(options['seed'])

        with transaction.atomic():
            if options['flush']:
                # appointments first: patient/doctor references are protected
                Appointment.objects.all().delete()
                Patient.objects.all().delete()
                Doctor.objects.all().delete()
                self.stdout.write('Flushed clinic data')

            doctors = self.create_doctors()
            patients = self.create_patients()
            self.create_appointments(doctors, patients, options['appointments'])

        self.stdout.write(self.style.SUCCESS('Sample data created'))

    def create_doctors(self):
        doctors_data = [
            {'name': 'Dr. Laura Gómez', 'specialty': 'Cardiology'},
            {'name': 'Dr. Andrés Ruiz', 'specialty': 'Pediatrics'},
            {'name': 'Dr. Marta Silva', 'specialty': 'Dermatology'},
            {'name': 'Dr. Pablo Torres', 'specialty': 'General Medicine'},
        ]
        doctors = []
        for data in doctors_data:
            doctor, created = Doctor.objects.get_or_create(name=data['name'], defaults=data)
            doctors.append(doctor)
            if created:
                self.stdout.write(f'Created doctor: {doctor}')
        return doctors

    def create_patients(self):
        patients_data = [
            {'name': 'Ana Pérez', 'email': 'ana@example.com', 'phone': 5551234, 'dni': 12345678},
            {'name': 'Carlos Díaz', 'email': 'carlos@example.com', 'phone': 5552345, 'dni': 23456789},
            {'name': 'Lucía Romero', 'email': 'lucia@example.com', 'phone': 5553456, 'dni': 34567890},
            {'name': 'Jorge Castro', 'email': 'jorge@example.com', 'phone': 5554567, 'dni': 45678901},
            {'name': 'Sofía Herrera', 'email': 'sofia@example.com', 'phone': 5555678, 'dni': 56789012},
        ]
        patients = []
        for data in patients_data:
            patient, created = Patient.objects.get_or_create(email=data['email'], defaults=data)
            patients.append(patient)
            if created:
                self.stdout.write(f'Created patient: {patient}')
        return patients

    def create_appointments(self, doctors, patients, count):
        reasons = ['Routine check-up', 'Follow-up visit', 'Lab results review', 'Chest pain', 'Skin rash', 'Fever']
        start = timezone.now().replace(minute=0, second=0, microsecond=0) + timedelta(days=1)
        for i in range(count):
            date = start + timedelta(days=i // 4, hours=9 + (i % 4) * 2)
            Appointment.objects.create(
                date=date,
                reason=random.choice(reasons),
                patient=random.choice(patients),
                doctor=random.choice(doctors),
            )
        self.stdout.write(f'Created {count} appointments')

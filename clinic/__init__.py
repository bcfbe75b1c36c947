"""Clinic application for the medical scheduling backend.

Holds the patient, doctor and appointment models together with the
repository, service and view layers that expose them over REST.
"""

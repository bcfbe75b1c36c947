"""
URL mappings for the clinic API.

Each entity in :data:`clinic.services.registry.ENTITIES` contributes the
same set of routes; trailing slashes are deliberately omitted.
"""
from django.urls import path, include

from .services.registry import ENTITIES
from .views import health
from .views.entities import entity_urlpatterns

urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
]

for descriptor in ENTITIES:
    urlpatterns += entity_urlpatterns(descriptor)

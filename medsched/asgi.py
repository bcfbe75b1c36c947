"""
ASGI config for the medsched project.

Only plain HTTP is served; each request runs on its own worker unit
provided by the ASGI host.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "medsched.settings")

application = get_asgi_application()

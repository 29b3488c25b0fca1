"""
ASGI config for the vetclinic project.

The API is plain HTTP; no WebSocket routing is mounted.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "vetclinic.settings")

application = get_asgi_application()

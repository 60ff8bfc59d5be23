# PGN/PGN/wsgi.py
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "PGN.settings")

application = get_wsgi_application()

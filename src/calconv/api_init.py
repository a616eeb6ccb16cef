"""Installs the built-in calendars as the api registry when calconv is imported."""
from .api import set_registry
from .bootstrap import build_registry

set_registry(build_registry())

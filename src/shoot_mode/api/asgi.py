"""ASGI entrypoint for the shoot mode API."""

from shoot_mode.api.app import create_app
from shoot_mode.containers import build_container

app = create_app(build_container())

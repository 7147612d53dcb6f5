"""ASGI entrypoint for the coffee tracker API."""

from coffee_tracker.api.app import create_app
from coffee_tracker.containers import build_container

app = create_app(build_container())

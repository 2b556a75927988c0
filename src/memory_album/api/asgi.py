"""ASGI entrypoint for the memory album API."""

from memory_album.api.app import create_app
from memory_album.containers import build_container

app = create_app(build_container())

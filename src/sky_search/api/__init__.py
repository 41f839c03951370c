"""HTTP API of the Sky Search gateway."""

from sky_search.api.errors import register_error_handlers
from sky_search.api.routes import router

__all__ = ["register_error_handlers", "router"]

# Admin routers (variation detection and merge)
from .routes.admin import admin_routers

# Public routers
from .routes.health import health_router

public_routers = [
    ("health", health_router),
]

__all__ = ["admin_routers", "public_routers"]

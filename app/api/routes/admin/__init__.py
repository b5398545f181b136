from .variations import variations_admin_router

admin_routers = [
    ("variations", variations_admin_router),
]

__all__ = ["admin_routers"]

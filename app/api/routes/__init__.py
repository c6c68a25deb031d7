# Export all routers
from . import two

__all__ = ["two"]

"""API Routes"""

from . import catalog, generation, memory

__all__ = ["catalog", "generation", "memory"]

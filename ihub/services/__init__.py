# ihub/services/__init__.py
from . import graph, hierarchy, progress, status

__all__ = ["graph", "hierarchy", "progress", "status"]

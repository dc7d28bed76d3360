"""
API Routers
Separate router modules for each domain.
"""

from app.routers import jvm_version

__all__ = ["jvm_version"]

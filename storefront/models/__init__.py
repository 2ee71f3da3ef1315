"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy.
"""

from .deal import Deal

__all__ = [
    "Deal",
]

"""Import all models so SQLAlchemy metadata knows about them."""
from minemods.models.base import Base
from minemods.models.mod import Mod

__all__ = ["Base", "Mod"]

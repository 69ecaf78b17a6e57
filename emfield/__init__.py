"""Electric field and potential of point charges, with an interactive pygame viewer."""

__version__ = "0.1.0"
__all__ = ["vector", "charge", "field", "scene", "gui"]
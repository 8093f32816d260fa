from .base import ConfigSchema, WireSchema

__all__ = ["ConfigSchema", "WireSchema"]

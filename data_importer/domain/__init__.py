"""Domain layer: datasets, column profiles and the services that build them."""

__all__ = []

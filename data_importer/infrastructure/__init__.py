"""Infrastructure layer for the data importer.

This layer contains the adapters around third-party readers and the console.
It implements the ports defined in the application layer.
"""

__all__ = []

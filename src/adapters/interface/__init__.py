"""Interface adapters package."""

__all__ = []

"""Adapters package."""

__all__ = []

"""Seeder base module."""

from taskviews.core.seeders.base import Seeder

__all__ = ["Seeder"]

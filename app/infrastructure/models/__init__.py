"""ORM models used by the application infrastructure."""

from .donut_log import DonutLogModel

__all__ = ["DonutLogModel"]

"""Repository implementations for infrastructure layer."""

from .donut_log_repository import DonutLogRepository

__all__ = ["DonutLogRepository"]

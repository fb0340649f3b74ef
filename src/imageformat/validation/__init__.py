"""Validation module"""

from .image_validator import ImageValidator

__all__ = ["ImageValidator"]

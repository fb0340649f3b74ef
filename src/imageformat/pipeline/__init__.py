"""Pipeline orchestration module"""

from .naming import derive_name
from .processor import StepEvent, StepObserver, process_image

__all__ = ["process_image", "derive_name", "StepEvent", "StepObserver"]

from .extractor import InvalidInput, extract_resume_fields
from .location import LocationPass, build_location_passes, extract_location
from .skills import extract_skills

__all__ = [
    "InvalidInput",
    "extract_resume_fields",
    "extract_location",
    "extract_skills",
    "LocationPass",
    "build_location_passes",
]

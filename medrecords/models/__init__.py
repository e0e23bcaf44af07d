"""Data schemas and validation."""
from .schemas import Record, EMPTY_RECORD, FIELD_MAP, GENDER_CHOICES, coerce_age

__all__ = [
    "Record",
    "EMPTY_RECORD",
    "FIELD_MAP",
    "GENDER_CHOICES",
    "coerce_age",
]

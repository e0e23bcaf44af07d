"""
MedRecords - Medical Record Management Client

Edit patient visit records against a remote records API.
"""

__version__ = "1.0.0"

from .records_client import RecordsClient
from .models.schemas import Record

__all__ = [
    "RecordsClient",
    "Record",
]

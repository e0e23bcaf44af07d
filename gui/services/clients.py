"""Client factories for the GUI layer."""

from __future__ import annotations

from typing import Optional

from medrecords.records_client import RecordsClient


def get_records_client(base_url: Optional[str] = None) -> RecordsClient:
    """Return a records API client for the configured (or given) endpoint."""

    return RecordsClient(base_url=base_url)

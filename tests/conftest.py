"""
Shared fixtures for all tests.
"""
import os
import sys
from unittest.mock import MagicMock, patch

import pytest

# Ensure project root is on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from medrecords.records_client import RecordsClient  # noqa: E402
from fakes import BASE_URL, FakeRecordsServer  # noqa: E402


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def remote_record():
    """A record as the server returns it."""
    return {
        "id": "42",
        "patientName": "John Smith",
        "age": 51,
        "gender": "Male",
        "contactNumber": "555-2000",
        "doctorName": "Dr. Patel",
        "diagnosis": "Hypertension",
        "visitDate": "2024-02-10",
    }


@pytest.fixture
def fake_server(remote_record):
    server = FakeRecordsServer([remote_record])
    with patch("medrecords.records_client.requests.request", side_effect=server):
        yield server


@pytest.fixture
def client():
    return RecordsClient(base_url=BASE_URL)


@pytest.fixture
def mock_client(remote_record):
    """A RecordsClient double for service-level tests."""
    mock = MagicMock(spec=RecordsClient)
    mock.list_records.return_value = [remote_record]
    mock.create_record.return_value = {"id": "43"}
    mock.update_record.return_value = {"id": "42"}
    mock.delete_record.return_value = None
    return mock

"""
Tests for gui/services/records_service.py.

Covers the snapshot policy: replaced wholesale on success, kept as-is on any
failure, and never patched locally on delete.
"""
from unittest.mock import Mock

import pytest

from medrecords.exceptions import FetchError, RemoteError, TransportError
from medrecords.models.schemas import Record
from gui.services.records_service import RecordCollectionView


class TestRefresh:

    def test_refresh_replaces_snapshot(self, mock_client):
        view = RecordCollectionView(mock_client)

        records = view.refresh()

        assert view.records == records
        assert [r.record_id for r in records] == ["42"]
        assert view.last_refreshed is not None

    def test_refresh_keeps_server_order_and_duplicates(self, mock_client):
        mock_client.list_records.return_value = [
            {"id": "3", "patientName": "C"},
            {"id": "1", "patientName": "A"},
            {"id": "3", "patientName": "C"},
        ]
        view = RecordCollectionView(mock_client)

        view.refresh()

        assert [r.record_id for r in view.records] == ["3", "1", "3"]

    def test_failed_refresh_on_empty_snapshot_stays_empty(self, mock_client):
        mock_client.list_records.side_effect = RemoteError("boom", status_code=500, body="")
        view = RecordCollectionView(mock_client)

        with pytest.raises(FetchError):
            view.refresh()

        assert view.records == ()
        assert view.last_refreshed is None

    @pytest.mark.parametrize("error", [
        RemoteError("boom", status_code=500),
        TransportError("unreachable"),
    ])
    def test_failed_refresh_keeps_previous_snapshot(self, mock_client, error):
        view = RecordCollectionView(mock_client)
        before = view.refresh()
        mock_client.list_records.side_effect = error

        with pytest.raises(FetchError) as excinfo:
            view.refresh()

        assert view.records == before
        assert excinfo.value.__cause__ is error

    def test_malformed_item_does_not_truncate_snapshot(self, mock_client):
        view = RecordCollectionView(mock_client)
        before = view.refresh()
        mock_client.list_records.return_value = [{"id": "1", "patientName": "A"}, "garbage"]

        with pytest.raises(FetchError):
            view.refresh()

        assert view.records == before

    def test_find(self, mock_client):
        view = RecordCollectionView(mock_client)
        view.refresh()

        assert view.find("42").patient_name == "John Smith"
        assert view.find(42) is not None
        assert view.find("nope") is None


class TestRemove:

    def test_remove_deletes_then_refreshes_once(self, mock_client):
        view = RecordCollectionView(mock_client)
        view.refresh()
        mock_client.list_records.reset_mock()
        mock_client.list_records.return_value = []

        assert view.remove("42") is True

        mock_client.delete_record.assert_called_once_with("42")
        mock_client.list_records.assert_called_once()
        assert view.records == ()

    def test_declined_confirmation_sends_nothing(self, mock_client):
        view = RecordCollectionView(mock_client)
        confirm = Mock(return_value=False)

        assert view.remove("42", confirm=confirm) is False

        confirm.assert_called_once()
        mock_client.delete_record.assert_not_called()
        mock_client.list_records.assert_not_called()

    def test_approved_confirmation_deletes(self, mock_client):
        view = RecordCollectionView(mock_client)

        assert view.remove("42", confirm=lambda: True) is True
        mock_client.delete_record.assert_called_once_with("42")

    def test_failed_delete_keeps_row_and_raises(self, mock_client):
        view = RecordCollectionView(mock_client)
        view.refresh()
        mock_client.list_records.reset_mock()
        mock_client.delete_record.side_effect = RemoteError("nope", status_code=500)

        with pytest.raises(RemoteError):
            view.remove("42")

        mock_client.list_records.assert_not_called()
        assert [r.record_id for r in view.records] == ["42"]

    def test_remove_scenario_against_server(self, fake_server, client):
        view = RecordCollectionView(client)
        view.refresh()
        assert view.find("42") is not None

        view.remove("42")

        assert view.find("42") is None
        assert [c[0] for c in fake_server.calls] == ["GET", "DELETE", "GET"]


def test_snapshot_is_immutable_sequence(mock_client):
    view = RecordCollectionView(mock_client)
    view.refresh()

    assert isinstance(view.records, tuple)
    assert isinstance(view.records[0], Record)

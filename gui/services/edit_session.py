"""Edit session: the single form buffer and the save protocol.

State:
    buffer  -- the record being composed; no id means "creating", an id means "editing"
    saving  -- in-flight flag; set before a create/update is dispatched and
               cleared when it settles, whatever the outcome

Only one edit buffer exists. Starting an edit while another is open discards
the unsaved one.
"""

from __future__ import annotations

from typing import Any

from medrecords.exceptions import Busy, ValidationError
from medrecords.models.schemas import EMPTY_RECORD, Record
from medrecords.records_client import RecordsClient
from medrecords.utils.logger import get_logger

from gui.services.records_service import RecordCollectionView

logger = get_logger(__name__)


class EditSession:
    def __init__(self, client: RecordsClient, collection: RecordCollectionView):
        self.client = client
        self.collection = collection
        self.buffer: Record = EMPTY_RECORD
        self._saving = False

    @property
    def saving(self) -> bool:
        return self._saving

    @property
    def is_editing(self) -> bool:
        return not self.buffer.is_new

    def start_create(self) -> None:
        """Reset the buffer to a blank, unsaved record."""
        self.buffer = EMPTY_RECORD

    def start_edit(self, record: Record) -> None:
        """Load a copy of ``record`` (id included) into the buffer."""
        if self.is_editing and self.buffer.record_id != record.record_id:
            logger.debug("Discarding unsaved edits to %s", self.buffer.record_id)
        self.buffer = record.model_copy()

    def update_field(self, name: str, value: Any) -> None:
        self.buffer = self.buffer.with_field(name, value)

    def save(self) -> Any:
        """Create or update the buffered record, then refresh the collection.

        Pre:  buffer holds a record with a non-empty patient name; no save in flight.
        Post: on success the buffer is blank and the collection was re-fetched once.
              On failure the buffer is exactly as the user left it.

        Returns:
            The server's response body for the create/update.

        Raises:
            ValidationError: patient name is empty (no request sent).
            Busy: a save is already in flight (no request sent).
            RemoteError / TransportError: the create/update failed.
            FetchError: the save went through but the refresh after it failed.
        """
        if not self.buffer.patient_name:
            raise ValidationError(
                "Patient Name is required",
                code="PATIENT_NAME_REQUIRED",
                detail={"field": "patient_name"},
            )
        if self._saving:
            raise Busy("A save is already in progress")

        self._saving = True
        try:
            record = self.buffer
            payload = record.to_payload()
            if record.is_new:
                logger.info("Creating record for %s", record.patient_name)
                result = self.client.create_record(payload)
            else:
                logger.info("Updating record %s", record.record_id)
                result = self.client.update_record(record.record_id, payload)

            self.buffer = EMPTY_RECORD
            self.collection.refresh()
            return result
        finally:
            self._saving = False

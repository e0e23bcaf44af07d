"""Record collection view: the last fetched snapshot of all records.

The snapshot is replaced wholesale after every successful mutation; rows are
never patched or removed locally. A failed fetch keeps the previous snapshot.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Tuple

from medrecords.exceptions import FetchError, RemoteError, TransportError
from medrecords.models.schemas import Record
from medrecords.records_client import RecordsClient
from medrecords.utils.logger import get_logger

logger = get_logger(__name__)

ConfirmFn = Callable[[], bool]


class RecordCollectionView:
    """Owns the collection snapshot.

    Ordering and uniqueness are whatever the server returns; nothing is
    sorted, filtered or deduplicated here.
    """

    def __init__(self, client: RecordsClient):
        self.client = client
        self._records: Tuple[Record, ...] = ()
        self.last_refreshed: Optional[datetime] = None

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def find(self, record_id: str) -> Optional[Record]:
        for record in self._records:
            if record.record_id == str(record_id):
                return record
        return None

    def refresh(self) -> Tuple[Record, ...]:
        """Re-read the whole collection and swap the snapshot.

        Raises:
            FetchError: the read failed; the previous snapshot is kept.
        """
        try:
            remote = self.client.list_records()
            mapped = tuple(Record.from_remote(item) for item in remote)
        except (RemoteError, TransportError) as exc:
            logger.warning("Fetch failed, keeping %d cached records: %s", len(self._records), exc)
            raise FetchError("Failed to fetch records", detail=exc.message) from exc
        except ValueError as exc:
            logger.warning("Malformed record in fetch, keeping cached records: %s", exc)
            raise FetchError("Failed to fetch records", code="MALFORMED_RECORD", detail=str(exc)) from exc

        self._records = mapped
        self.last_refreshed = datetime.now()
        logger.info("Loaded %d records", len(mapped))
        return mapped

    def remove(self, record_id: str, confirm: Optional[ConfirmFn] = None) -> bool:
        """Delete one record, then re-fetch.

        Args:
            record_id: Id of the record to delete
            confirm: Returns False to abort; None auto-approves

        Returns:
            False if the user declined, True once the delete and refresh succeeded.

        Raises:
            RemoteError / TransportError: the delete failed; the row stays.
            FetchError: the delete succeeded but the follow-up refresh did not.
        """
        if confirm is not None and not confirm():
            logger.debug("Delete of %s declined", record_id)
            return False

        self.client.delete_record(record_id)
        logger.info("Deleted record %s", record_id)
        self.refresh()
        return True

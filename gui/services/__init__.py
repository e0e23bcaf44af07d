from . import clients, edit_session, records_service  # noqa: F401

from .clients import get_records_client
from .records_service import RecordCollectionView
from .edit_session import EditSession

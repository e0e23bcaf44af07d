"""Application state container.

Holds the presentation-only bits the views read back: status line, busy
indicator and the last notification. Record data lives in the services.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class AppState:
    """Holds ephemeral UI state."""

    status_message: str = "Ready"
    is_busy: bool = False
    # (level, title, message)
    last_notification: Optional[Tuple[str, str, str]] = None

"""Async helpers.

Record requests have no timeout and an idle backend can take a while to
answer, so views run them on a worker thread and get the result back on the
Tk thread through `after`.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from medrecords.utils.logger import get_logger

logger = get_logger(__name__)


def run_in_background(
    widget: Any,
    task: Callable[[], Any],
    callback: Optional[Callable[[Any], None]] = None,
) -> threading.Thread:
    """Run `task` on a daemon thread and hand its result to `callback` on the Tk thread.

    `widget` only needs an `after(ms, fn)` method. The callback always runs,
    with None as the result if the task raised.
    """

    def worker() -> None:
        result = None
        try:
            result = task()
        except Exception:
            logger.exception("Background task failed")
        if callback is not None:
            widget.after(0, lambda: callback(result))

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    return thread

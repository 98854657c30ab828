import time
import traceback
from typing import Any, Dict, List, Optional


def add_traceback(target, step: str, info: str, *, with_stack: bool = False) -> None:
    """
    Append a trace event to *target*.

    Parameters
    ----------
    target     : a list of events, or any object owning a `traceback_info` list.
    step, info : short label and free-form description.
    with_stack : include trimmed call-stack (default False).
    """
    if isinstance(target, list):
        events = target
    elif hasattr(target, "traceback_info"):
        events = target.traceback_info
    else:
        raise AttributeError(f"{target!r} has no attribute 'traceback_info'")

    event: Dict[str, Any] = {
        "step":       step,
        "info":       info,
        "timestamp":  time.time(),
    }
    if with_stack:
        # omit the last frame (this helper)
        event["stack"] = traceback.format_stack()[:-1]

    events.append(event)


def format_traceback(events: List[Dict[str, Any]], last: Optional[int] = None) -> List[str]:
    """Render events as 'step: info' lines, optionally only the last few."""
    if last is not None:
        events = events[-last:] if last > 0 else []
    return [f"{event['step']}: {event['info']}" for event in events]

"""structlog wiring for the CLI and library callers."""
from __future__ import annotations

import logging
import sys
from typing import Dict, MutableMapping

import structlog

_LEVELS: Dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

EventDict = MutableMapping[str, object]


def configure_logging(level: str | None = None) -> None:
    """Send JSON log lines to stderr at ``level`` (default: warning).

    Each record has ``ts``, ``level``, ``component`` and ``msg`` plus any
    bound context such as ``shares`` or ``subset``. stdout carries only the
    command output, so ``sharecrack solve --json`` stays parseable.
    """

    threshold = _LEVELS.get((level or "warning").lower(), logging.WARNING)

    logging.basicConfig(
        level=threshold,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            _event_as_msg,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        cache_logger_on_first_use=True,
    )


def _add_component(logger: object, _method: str, event_dict: EventDict) -> EventDict:
    # module path of the emitting logger, e.g. sharecrack.consensus.cracker
    event_dict.setdefault("component", getattr(logger, "name", None) or "sharecrack")
    return event_dict


def _event_as_msg(_logger: object, _method: str, event_dict: EventDict) -> EventDict:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


__all__ = ["configure_logging"]

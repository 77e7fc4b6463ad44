"""
Logging setup and the telemetry sink handed to extraction callbacks.

Core modules only log at debug level through module loggers and report
outcomes through an optional on_event callback. This module is the one place
that decides where those go (stdlib logging, plus logfire when enabled).
"""

import logging
from typing import Any, Dict

import logfire

logger = logging.getLogger("recipe_box.events")

_logfire_ready = False


def configure_logging(settings) -> bool:
    """
    Configure the root logger and, when enabled, logfire.

    Returns True when logfire is active. A logfire failure (missing token,
    offline) falls back to stdlib logging only.
    """
    global _logfire_ready

    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    _logfire_ready = False
    if settings.logfire_enabled:
        # Setting up logfire for tracing (skip if no credentials)
        try:
            logfire.configure(send_to_logfire="if-token-present", console=False)
            _logfire_ready = True
            logger.info("Logfire configured successfully")
        except Exception as e:
            logger.warning(f"Logfire setup skipped: {e}")

    return _logfire_ready


def logfire_event_sink(event: str, fields: Dict[str, Any]) -> None:
    """on_event callback: forward extraction / sanitizer events"""
    logger.info(f"{event} {fields}")
    if _logfire_ready:
        logfire.info(event, **fields)

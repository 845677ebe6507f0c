"""Telemetry services built on the standard ``logging`` package.

This module exposes a narrow surface area for the rest of the editor:

``configure(...)`` -- apply a named preset or an explicit ``TelemetryConfig``
``get_logger(name)`` -- fetch a logger living under the ``mtx`` namespace
``record_event(name, ...)`` -- emit structured events at a chosen level
``span(name, ...)`` -- context manager timing a block and tagging its component
"""

from __future__ import annotations

import json
import logging
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

ENV_PREFIX = "MTX_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "mtx")
DEFAULT_LOG_FILE = os.getenv(f"{ENV_PREFIX}LOG_FILE", "")

_HANDLER_MARKER = "_mtx_telemetry"
_ACTIVE_CONFIG: Optional["TelemetryConfig"] = None


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


@dataclass(slots=True)
class TelemetryConfig:
    """Output settings applied to the engine logger."""

    level: str = "INFO"
    console: bool = True
    json_format: bool = False
    log_file: Optional[str] = None


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        data = getattr(record, "data", None)
        if isinstance(data, dict):
            payload.update({key: _stringify(value) for key, value in data.items()})
        return json.dumps(payload)


def _build_preset_config(preset: str) -> TelemetryConfig:
    key = preset.lower()
    if key == "development":
        return TelemetryConfig(level="DEBUG", console=True)
    if key == "production":
        log_path = _env("LOG_FILE", DEFAULT_LOG_FILE) or "mtx.log"
        return TelemetryConfig(level="INFO", console=False, log_file=log_path)
    if key == "quiet":
        return TelemetryConfig(level="WARNING", console=False)
    raise ValueError(f"Unknown preset '{preset}'.")


def _build_default_config() -> TelemetryConfig:
    return TelemetryConfig(
        level=(_env("LOG_LEVEL") or "INFO").upper(),
        console=not _env_flag("DISABLE_CONSOLE", False),
        json_format=_env_flag("LOG_JSON", False),
        log_file=_env("LOG_FILE") or DEFAULT_LOG_FILE or None,
    )


def _install(config: TelemetryConfig) -> None:
    root = logging.getLogger(DEFAULT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()

    if config.json_format:
        formatter: logging.Formatter = _JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
        )

    handlers: list[logging.Handler] = []
    if config.console:
        handlers.append(logging.StreamHandler())
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    if not handlers:
        handlers.append(logging.NullHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        root.addHandler(handler)
    root.setLevel(config.level.upper())


def configure(
    *, config: Optional[TelemetryConfig] = None, preset: Optional[str] = None
) -> None:
    """Replace the active logging configuration.

    Parameters
    ----------
    config:
        Explicit ``TelemetryConfig`` to adopt.
    preset:
        Named preset (``"development"``, ``"production"``, ``"quiet"``).
        ``config`` and ``preset`` are mutually exclusive.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _build_preset_config(preset)
    elif config is None:
        config = _build_default_config()

    _install(config)
    _ACTIVE_CONFIG = config


def attach_handler(handler: logging.Handler) -> None:
    """Add ``handler`` to the engine logger; it is dropped by the next ``configure``."""

    setattr(handler, _HANDLER_MARKER, True)
    logging.getLogger(DEFAULT_LOGGER_NAME).addHandler(handler)


def active_config() -> Optional[TelemetryConfig]:
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger below the engine namespace."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name != DEFAULT_LOGGER_NAME and not logger_name.startswith(
        f"{DEFAULT_LOGGER_NAME}."
    ):
        logger_name = f"{DEFAULT_LOGGER_NAME}.{logger_name}"
    return logging.getLogger(logger_name)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unsupported log level '{level}'.")
    return resolved


def record_event(
    name: str,
    *,
    level: str | int = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` record."""

    log = get_logger(logger_name)
    payload = {"event": name, **(data or {})}
    log.log(
        _resolve_level(level),
        "event::%s %s",
        name,
        payload,
        extra={"data": payload},
    )


@dataclass
class SpanHandle:
    """Handle returned from ``span`` for optional metadata updates."""

    logger: logging.Logger
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    failed: bool = False

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _emit(
        self, level: int, message: str, extra: Optional[Dict[str, Any]] = None
    ) -> None:
        payload = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})
        self.logger.log(level, "%s %s", message, payload, extra={"data": payload})

    def fail(self, reason: str) -> None:
        self.failed = True
        self._emit(logging.ERROR, "span::fail", {"reason": reason})

    def cancel(self, reason: str | None = None) -> None:
        extra = {"reason": reason} if reason else None
        self._emit(logging.WARNING, "span::cancel", extra)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a code block and log its completion at debug level.

    Parameters
    ----------
    name:
        Operation name reported as ``span``.
    logger_name:
        Target logger; defaults to the engine logger.
    component:
        If ``True`` use ``name`` as the component; if a string, use it as the
        component identifier.
    metadata:
        Extra key/value pairs attached to every record of the span.
    """

    log = get_logger(logger_name)
    component_name = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    started = time.perf_counter()
    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    finally:
        if not handle.failed and log.isEnabledFor(logging.DEBUG):
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            handle._emit(
                logging.DEBUG, "span::end", {"elapsed_ms": f"{elapsed_ms:.3f}"}
            )


configure()
logger = get_logger()

__all__ = [
    "SpanHandle",
    "TelemetryConfig",
    "active_config",
    "attach_handler",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]

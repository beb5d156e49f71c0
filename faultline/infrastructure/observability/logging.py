"""
Logging setup with contextvars-based metadata injection.

- Adds the observed origin and service into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers (opentelemetry).
"""

import contextvars
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_origin = contextvars.ContextVar("origin", default="-")
cv_service = contextvars.ContextVar("service", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.origin = cv_origin.get() or "-"
        record.service = cv_service.get() or "-"
        return True


LogContextTokens = list[contextvars.Token[str]]


def set_log_context(*, origin: str | None = None, service: str | None = None) -> LogContextTokens:
    """Update logging context (thread-safe via contextvars). Returns tokens for reset_log_context()."""
    tokens: LogContextTokens = []
    if origin is not None:
        tokens.append(cv_origin.set(str(origin)))
    if service is not None:
        tokens.append(cv_service.set(str(service)))
    return tokens


def reset_log_context(tokens: LogContextTokens) -> None:
    """Restore the context that was current before the matching set_log_context() call."""
    for token in reversed(tokens):
        token.var.reset(token)


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "origin": str(cv_origin.get() or "-"),
        "service": str(cv_service.get() or "-"),
    }


def clear_log_context() -> None:
    """Reset context to defaults."""
    cv_origin.set("-")
    cv_service.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] o=%(origin)s s=%(service)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | o=%(origin)s s=%(service)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger("opentelemetry").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )

from . import (
    canon,
    config,
    exceptions,
    types,
    headers,
    validate,
    ingest,
    formats,
    summary,
    prompt,
    session,
)

__all__ = [
    "canon",
    "config",
    "exceptions",
    "types",
    "headers",
    "validate",
    "ingest",
    "formats",
    "summary",
    "prompt",
    "session",
]

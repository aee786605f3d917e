"""Formatter JSON (python-json-logger) com campos padronizados.

Exemplo de output:
    {"asctime": "...", "level": "WARNING", "logger": "api.connectors.twitch.helix_logging",
     "message": "helix_api_error", "correlation_id": "...", "service": "helix_eventsub",
     "status_code": 409}
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável no format string
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON; campos de `extra` são anexados ao registro."""
    format_string = " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)

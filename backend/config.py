"""
Runtime configuration for the Pessoas API.

Everything is read from environment variables. Invalid values never abort
startup; they fall back to the defaults below.
"""

import os
import re
from typing import Mapping, Optional

HOST = "0.0.0.0"
DEFAULT_PORT = 9999
MAX_PORT = 65535

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

_PORT_PATTERN = re.compile(r"\+?[0-9]+")


def get_port(environ: Optional[Mapping[str, str]] = None) -> int:
    """Return the listening port from ``PORT``, or 9999 if unset or not a u16."""
    if environ is None:
        environ = os.environ
    raw = environ.get("PORT")
    if raw is None or not _PORT_PATTERN.fullmatch(raw):
        return DEFAULT_PORT

    digits = raw.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(MAX_PORT)):
        return DEFAULT_PORT
    port = int(digits)
    if port > MAX_PORT:
        return DEFAULT_PORT
    return port

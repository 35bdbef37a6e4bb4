"""Logging utilities"""

import os
import sys
from datetime import datetime, timezone

from lan_isolation.config import LOG_FILE

_log_file = LOG_FILE


def init_logging(log_file=LOG_FILE):
    """Create the log directory if needed and truncate the log file for this run"""
    global _log_file
    _log_file = log_file

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    with open(log_file, "w", encoding="utf-8"):
        pass


def log(*what):
    """Print to console and append a timestamped line to the log file"""
    message = " ".join(str(part) for part in what)
    timestamp = datetime.now(timezone.utc).isoformat()

    print(message)

    try:
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except OSError as e:
        print(f"Failed to write to log file: {e}", file=sys.stderr)


def found(flag):
    """Success/failure indicator for existence probes"""
    return "✅" if flag else "❌"

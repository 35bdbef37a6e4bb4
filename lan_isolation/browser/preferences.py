"""Browser profile preference patching"""

import json
import os
import stat
import tempfile
from pathlib import Path

from lan_isolation.utils.logging import log

READ_ONLY = stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH  # 0o444


def preferences_path(profile_dir):
    return Path(profile_dir) / "Default" / "Preferences"


def ensure_profile_preferences(profile_dir, bootstrap):
    """
    Disable password leak detection in the profile's Preferences file.

    If the profile or its Preferences file does not exist yet, `bootstrap`
    is called to launch and close a throwaway browser against the profile
    so Chromium creates it. The patched file is left read-only so the
    long-lived browser cannot revert the setting.

    Safe to call on every run. A Preferences file still missing after the
    bootstrap launch is skipped without error.
    """
    log("Setting up browser preferences...")

    prefs_file = preferences_path(profile_dir)

    if not Path(profile_dir).is_dir() or not prefs_file.exists():
        bootstrap(profile_dir)

    if not prefs_file.exists():
        log(f"  ⚠️ No Preferences file at {prefs_file}, skipping patch")
        return

    with open(prefs_file, "r", encoding="utf-8") as f:
        preferences = json.load(f)

    profile = preferences.get("profile")
    if isinstance(profile, dict):
        profile["password_manager_leak_detection"] = False
    else:
        preferences["profile"] = {"password_manager_leak_detection": False}

    _write_atomically(prefs_file, preferences)
    log("Password leak detection disabled in profile preferences ✅")


def _write_atomically(path, data):
    """Replace `path` with pretty-printed JSON, leaving it read-only.

    The old file stays untouched if serialization fails.
    """
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.chmod(tmp_name, READ_ONLY)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise

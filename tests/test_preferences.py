import json
import stat

import pytest

from lan_isolation.browser import preferences
from lan_isolation.browser.preferences import ensure_profile_preferences, preferences_path


def write_prefs(profile_dir, data):
    path = preferences_path(profile_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def mode(path):
    return stat.S_IMODE(path.stat().st_mode)


class RecordingBootstrap:
    """Creates a Chromium-like Preferences file the way a first launch would"""

    def __init__(self, data=None):
        self.data = data if data is not None else {"profile": {"name": "Person 1"}}
        self.calls = []

    def __call__(self, profile_dir):
        self.calls.append(profile_dir)
        if self.data is not False:
            write_prefs(profile_dir, self.data)


@pytest.fixture
def profile_dir(tmp_path):
    return tmp_path / "profile"


def test_fresh_profile_is_bootstrapped_and_patched(profile_dir):
    bootstrap = RecordingBootstrap()

    ensure_profile_preferences(profile_dir, bootstrap)

    assert bootstrap.calls == [profile_dir]
    path = preferences_path(profile_dir)
    prefs = json.loads(path.read_text(encoding="utf-8"))
    assert prefs["profile"] == {"name": "Person 1", "password_manager_leak_detection": False}
    assert mode(path) == 0o444


def test_written_file_is_pretty_printed(profile_dir):
    ensure_profile_preferences(profile_dir, RecordingBootstrap())

    text = preferences_path(profile_dir).read_text(encoding="utf-8")
    assert text.startswith("{\n  ")


def test_existing_profile_skips_bootstrap(profile_dir):
    write_prefs(profile_dir, {"profile": {"password_manager_leak_detection": True}})
    bootstrap = RecordingBootstrap()

    ensure_profile_preferences(profile_dir, bootstrap)

    assert bootstrap.calls == []
    prefs = json.loads(preferences_path(profile_dir).read_text(encoding="utf-8"))
    assert prefs["profile"]["password_manager_leak_detection"] is False


def test_missing_profile_section_is_created(profile_dir):
    write_prefs(profile_dir, {"browser": {"has_seen_welcome_page": True}})

    ensure_profile_preferences(profile_dir, RecordingBootstrap())

    prefs = json.loads(preferences_path(profile_dir).read_text(encoding="utf-8"))
    assert prefs["browser"] == {"has_seen_welcome_page": True}
    assert prefs["profile"] == {"password_manager_leak_detection": False}


def test_applying_twice_is_stable(profile_dir):
    bootstrap = RecordingBootstrap()

    ensure_profile_preferences(profile_dir, bootstrap)
    ensure_profile_preferences(profile_dir, bootstrap)

    assert len(bootstrap.calls) == 1
    path = preferences_path(profile_dir)
    prefs = json.loads(path.read_text(encoding="utf-8"))
    assert prefs["profile"]["password_manager_leak_detection"] is False
    assert mode(path) == 0o444


def test_missing_file_after_bootstrap_is_tolerated(profile_dir):
    bootstrap = RecordingBootstrap(data=False)

    ensure_profile_preferences(profile_dir, bootstrap)

    assert bootstrap.calls == [profile_dir]
    assert not preferences_path(profile_dir).exists()


def test_failed_write_leaves_previous_file_intact(profile_dir, monkeypatch):
    ensure_profile_preferences(profile_dir, RecordingBootstrap())
    path = preferences_path(profile_dir)
    before = path.read_text(encoding="utf-8")

    def broken_dump(data, f, **kwargs):
        f.write('{"profile": ')
        raise ValueError("serialization failed")

    monkeypatch.setattr(preferences.json, "dump", broken_dump)

    with pytest.raises(ValueError):
        ensure_profile_preferences(profile_dir, RecordingBootstrap())

    assert path.read_text(encoding="utf-8") == before
    assert mode(path) == 0o444
    assert sorted(p.name for p in path.parent.iterdir()) == ["Preferences"]

"""Step sequencing: login -> LAN settings -> isolation toggle"""

from dataclasses import dataclass, field
from typing import List, Optional

from lan_isolation.interaction.isolation import disable_isolation, find_isolation_checkbox
from lan_isolation.interaction.login import login
from lan_isolation.interaction.navigation import navigate_to_lan_settings
from lan_isolation.utils.logging import log
from lan_isolation.utils.timing import settle_delay

# Sequence states - strictly forward, FAILED reachable from any state
STATE_IDLE = "IDLE"
STATE_LOGGED_IN = "LOGGED_IN"
STATE_ON_LAN_SETTINGS_PAGE = "ON_LAN_SETTINGS_PAGE"
STATE_ISOLATION_CHECKED = "ISOLATION_CHECKED"
STATE_DONE = "DONE"
STATE_FAILED = "FAILED"


@dataclass
class SequenceResult:
    state: str = STATE_IDLE
    history: List[str] = field(default_factory=lambda: [STATE_IDLE])
    error: Optional[BaseException] = None
    isolation_was_enabled: Optional[bool] = None

    @property
    def succeeded(self):
        return self.state == STATE_DONE

    def advance(self, state):
        self.state = state
        self.history.append(state)


def run_sequence(session, settings, pause=settle_delay):
    """
    Open the browser and drive it through the full sequence.

    Never raises for failures inside the sequence: the error is recorded on
    the returned SequenceResult along with the last state reached. The
    session is left open; closing it belongs to the caller.
    """
    result = SequenceResult()

    try:
        session.open()
        page = session.new_page()
        pause()

        login(page, settings)
        result.advance(STATE_LOGGED_IN)
        pause()

        frame = navigate_to_lan_settings(page)
        result.advance(STATE_ON_LAN_SETTINGS_PAGE)
        pause()

        checkbox, enabled = find_isolation_checkbox(frame)
        result.isolation_was_enabled = enabled
        result.advance(STATE_ISOLATION_CHECKED)

        if enabled:
            disable_isolation(frame, checkbox)
        else:
            log("LAN Isolation is already disabled ✅")
        pause()

        result.advance(STATE_DONE)
    except Exception as e:
        log(f"  ⚠️ Sequence failed in state {result.state}: {e}")
        result.error = e
        result.advance(STATE_FAILED)

    return result

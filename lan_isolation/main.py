#!/usr/bin/env python3
"""
Router LAN Isolation Disabler - Main Orchestration

Logs into the router admin UI and turns LAN Isolation off. Safe to run
after every router reboot or reset: if isolation is already off nothing
is changed.
"""

import argparse
import os
import signal
import sys
import threading
import warnings

from lan_isolation.browser.session import BrowserSession
from lan_isolation.config import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    SHUTDOWN_TIMEOUT_S,
    load_settings,
)
from lan_isolation.state.sequencer import run_sequence
from lan_isolation.utils.logging import init_logging, log

TERMINATION_SIGNALS = ("SIGINT", "SIGTERM", "SIGQUIT")


class Supervisor:
    """
    Single owner of the shutdown path.

    Receives the sequence result, and also hooks termination signals,
    uncaught exceptions (main and worker threads) and warnings. Every path
    ends in shutdown(), which runs at most once per process.
    """

    def __init__(
        self,
        session,
        shutdown_timeout=SHUTDOWN_TIMEOUT_S,
        exit_func=sys.exit,
        force_exit=os._exit,
    ):
        self.session = session
        self.shutdown_timeout = shutdown_timeout
        self.shutting_down = False
        self._exit = exit_func
        self._force_exit = force_exit

    # ========================================
    # HANDLER REGISTRATION
    # ========================================

    def install_handlers(self):
        for name in TERMINATION_SIGNALS:
            signum = getattr(signal, name, None)
            if signum is not None:
                signal.signal(signum, self._on_signal)

        sys.excepthook = self._on_uncaught
        threading.excepthook = self._on_thread_exception
        warnings.showwarning = self._on_warning

    def _on_signal(self, signum, frame):
        log(f"[APP] Received {signal.Signals(signum).name}")
        self.shutdown(EXIT_SUCCESS)

    def _on_uncaught(self, exc_type, exc, tb):
        self._exit_from_hook(exc, f"Uncaught Exception ({exc_type.__name__})")

    def _on_thread_exception(self, args):
        name = args.thread.name if args.thread else "unknown"
        self._exit_from_hook(args.exc_value, f"Uncaught Thread Exception ({name})")

    def _exit_from_hook(self, error, source):
        # SystemExit raised inside an excepthook does not end the process
        try:
            self.handle_error(error, source)
        except SystemExit as e:
            sys.stdout.flush()
            self._force_exit(e.code if isinstance(e.code, int) else EXIT_FAILURE)

    def _on_warning(self, message, category, filename, lineno, file=None, line=None):
        log(f"[APP] Process Warning: {category.__name__} {message}")
        log(f"  at {filename}:{lineno}")

    # ========================================
    # ERROR AND SHUTDOWN PATH
    # ========================================

    def handle_error(self, error, source):
        log(f"[APP] Error ({source}): {type(error).__name__} - {error}")

        if not self.shutting_down:
            log("[APP] Fatal error detected, initiating shutdown...")
            self.shutdown(EXIT_FAILURE)

    def _on_shutdown_timeout(self):
        print("[APP] Graceful shutdown timed out, forcing exit", file=sys.stderr)
        self._force_exit(EXIT_FAILURE)

    def shutdown(self, exit_code=EXIT_SUCCESS):
        """Close the browser and exit. Re-entrant calls only log."""
        if self.shutting_down:
            log("[APP] Shutdown already in progress...")
            return

        self.shutting_down = True
        log("[APP] Initiating graceful shutdown...")

        try:
            watchdog = threading.Timer(self.shutdown_timeout, self._on_shutdown_timeout)
            watchdog.daemon = True
            watchdog.start()

            self.session.close()
            watchdog.cancel()

            log("[APP] Graceful shutdown completed")
        except Exception as e:
            print(f"[APP] Error during graceful shutdown: {e}", file=sys.stderr)
            self._force_exit(EXIT_FAILURE)
            return

        self._exit(exit_code)

    def run(self, sequence):
        """Run the sequence and shut down according to its result"""
        result = sequence()

        if result.succeeded:
            log("All done! Exiting...")
            self.shutdown(EXIT_SUCCESS)
            return result

        error = result.error or RuntimeError(f"Sequence stopped in state {result.state}")
        self.handle_error(error, "Main Function Error")
        return result


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Disable LAN Isolation on the router through its web UI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment (a .env file in the working directory is also read):
  URL             Router admin URL (required)
  USERNAME        Router admin username (required)
  PASSWORD        Router admin password (required)
  HEADLESS        "true" to hide the browser window
  CHROMIUM_PATH   Explicit Chromium executable
  PROFILE_DIR     Browser profile directory override

Exit codes:
  0  LAN Isolation is off (changed or already off)
  1  Any failure
        """,
    )
    parser.parse_args(argv)

    init_logging()
    settings = load_settings()

    session = BrowserSession(settings)
    supervisor = Supervisor(session)
    supervisor.install_handlers()

    supervisor.run(lambda: run_sequence(session, settings))


if __name__ == "__main__":
    main()

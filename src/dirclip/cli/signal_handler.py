"""Signal handling utilities for the dirclip CLI.

SIGINT and SIGPIPE do not abort the process directly. The handlers record the
signal, output stops at the next write (see SafeWriter), and the CLI exits with
the conventional status code. The clipboard is never written after an
interruption.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

# SIGPIPE does not exist on Windows
SIGPIPE: Optional[int] = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Records SIGPIPE and SIGINT so the CLI can wind down cleanly.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigpipe_handler: Handler installed before ours, if SIGPIPE exists.
        original_sigint_handler: Handler installed before ours.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler: Any = signal.getsignal(SIGPIPE) if SIGPIPE is not None else None
        self.original_sigint_handler: Any = signal.getsignal(signal.SIGINT)

    @property
    def interrupted(self) -> bool:
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record SIGPIPE and restore the original handler for any further signal."""
        self.sigpipe_received.set()
        if SIGPIPE is not None:
            signal.signal(SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record SIGINT and restore the original handler, so a second ctrl+c aborts at once."""
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def reset(self) -> None:
        """Forget received signals."""
        self.sigpipe_received.clear()
        self.sigint_received.clear()


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the handlers for SIGPIPE (where available) and SIGINT."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Cleanup function registered with atexit.

    Redirects stdout to the null device after an interruption so that flushing buffered
    output at shutdown cannot produce a second broken pipe error.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)

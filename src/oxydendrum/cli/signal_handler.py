"""Signal handling for the oxydendrum CLI.

Piping a large tree into a pager or ``head`` closes stdout early, and users
interrupt long traversals with Ctrl+C. Both are recorded here so the CLI can
stop writing and exit with the conventional status instead of a traceback.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

# SIGPIPE does not exist on Windows
SIGPIPE = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Records SIGPIPE and SIGINT so output can be stopped cleanly.

    Each handler fires once: after recording the signal it restores the handler
    that was installed before, so a second Ctrl+C behaves as usual. SIGINT also
    raises KeyboardInterrupt, which stops a directory walk wherever it is; a
    closed pipe only matters once there is something left to write.

    Attributes:
        sigpipe_received: Event set when SIGPIPE arrives.
        sigint_received: Event set when SIGINT arrives.
        original_sigpipe_handler: Handler for SIGPIPE before setup_signal_handling(), or None
            where the platform has no SIGPIPE.
        original_sigint_handler: Handler for SIGINT before setup_signal_handling().
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(SIGPIPE) if SIGPIPE is not None else None
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    @property
    def interrupted(self) -> bool:
        """Whether either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        if SIGPIPE is not None:
            signal.signal(SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)
        raise KeyboardInterrupt


# Shared by the writer and the entry point
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE (where available) and SIGINT handlers."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Send stdout to the null device after an interruption.

    Python flushes stdout at shutdown; after a broken pipe that flush would
    print another error, so stdout is pointed at the null device first.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)

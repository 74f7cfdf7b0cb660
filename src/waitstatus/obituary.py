"""Summary record describing how a child process ended."""

import signal
from dataclasses import dataclass

from . import decoder
from .layout import HOST_LAYOUT, StatusLayout


# Added to the signal number when reporting a signal death as an exit code
SHELL_SIGNAL_OFFSET = 128


@dataclass(frozen=True)
class ChildStatus:
    """Decoded wait status. Dependent fields are None when they do not apply."""

    status: int
    exited: bool
    exit_code: int | None
    signaled: bool
    signal: int | None
    core_dumped: bool

    @property
    def returncode(self) -> int | None:
        """Exit code in shell convention (128 + signal for signal deaths)."""
        if self.exited:
            return self.exit_code
        if self.signaled:
            return SHELL_SIGNAL_OFFSET + self.signal
        return None

    @property
    def signal_name(self) -> str | None:
        """Symbolic name of the terminating signal, e.g. "SIGKILL"."""
        if self.signal is None:
            return None
        try:
            return signal.Signals(self.signal).name
        except ValueError:
            return None

    def describe(self) -> str:
        """One-line human readable summary."""
        if self.exited:
            return f"exited with code {self.exit_code}"
        if self.signaled:
            name = self.signal_name
            text = f"killed by signal {self.signal}"
            if name:
                text += f" ({name})"
            if self.core_dumped:
                text += ", core dumped"
            return text
        return f"unrecognised wait status {self.status:#06x}"

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "exited": self.exited,
            "exit_code": self.exit_code,
            "signaled": self.signaled,
            "signal": self.signal,
            "signal_name": self.signal_name,
            "core_dumped": self.core_dumped,
            "returncode": self.returncode,
        }


def decode(status: int, layout: StatusLayout = HOST_LAYOUT) -> ChildStatus:
    """
    Run all five queries over a status value.

    The dependent queries are only consulted after their gating query, so
    out-of-contract values never reach the record.

    Args:
        status: Raw status from os.wait(), os.waitpid() or os.wait4()
        layout: Host encoding to decode with

    Returns:
        ChildStatus: Decoded record
    """
    exited = decoder.exited_normally(status, layout)
    signaled = decoder.terminated_by_signal(status, layout)
    return ChildStatus(
        status=status,
        exited=exited,
        exit_code=decoder.exit_code(status, layout) if exited else None,
        signaled=signaled,
        signal=decoder.terminating_signal(status, layout) if signaled else None,
        core_dumped=signaled and decoder.core_dumped(status, layout),
    )

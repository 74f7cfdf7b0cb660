"""Host wait-status bit layouts.

Every POSIX system Python runs on (Linux with glibc or musl, macOS, the
BSDs, Solaris/illumos) packs the status word the same way:

    bits 0-6   terminating signal (0 = normal exit, 0x7f = stopped)
    bit  7     core dump flag
    bits 8-15  exit code (or stop signal when stopped)

On Windows, CPython's os.waitpid() returns the exit code shifted left by
8 bits and there are no signal or core bits at all.
"""

import platform
from dataclasses import dataclass

from .errors import LayoutError


@dataclass(frozen=True)
class StatusLayout:
    """Masks and shifts for one host's wait-status encoding."""

    name: str
    signal_mask: int
    stopped_value: int
    core_flag: int
    exit_shift: int
    exit_mask: int


POSIX_LAYOUT = StatusLayout(
    name="posix",
    signal_mask=0x7F,
    stopped_value=0x7F,
    core_flag=0x80,
    exit_shift=8,
    exit_mask=0xFF,
)

WINDOWS_LAYOUT = StatusLayout(
    name="windows",
    signal_mask=0,
    stopped_value=0,
    core_flag=0,
    exit_shift=8,
    exit_mask=0xFF,
)

LAYOUTS = {
    POSIX_LAYOUT.name: POSIX_LAYOUT,
    WINDOWS_LAYOUT.name: WINDOWS_LAYOUT,
}

AUTO = "auto"


def layout_for_platform(system: str | None = None) -> StatusLayout:
    """
    Pick the layout for an operating system.

    Args:
        system: Value in the style of platform.system(). Defaults to the host.

    Returns:
        StatusLayout: WINDOWS_LAYOUT for Windows, POSIX_LAYOUT otherwise
    """
    if system is None:
        system = platform.system()
    if system == "Windows":
        return WINDOWS_LAYOUT
    return POSIX_LAYOUT


HOST_LAYOUT = layout_for_platform()


def get_layout(name: str) -> StatusLayout:
    """
    Look up a layout by name.

    Args:
        name: "auto", or one of the keys of LAYOUTS (case-insensitive)

    Returns:
        StatusLayout: The matching layout

    Raises:
        LayoutError: If the name is unknown
    """
    key = name.strip().lower()
    if key == AUTO:
        return HOST_LAYOUT
    try:
        return LAYOUTS[key]
    except KeyError:
        known = ", ".join([AUTO] + sorted(LAYOUTS))
        raise LayoutError(f"Unknown layout {name!r} (expected one of: {known})")

"""Decode process wait statuses into exit codes, signals and core dumps."""

from .decoder import (
    core_dumped,
    exit_code,
    exited_normally,
    terminated_by_signal,
    terminating_signal,
)
from .layout import HOST_LAYOUT, POSIX_LAYOUT, WINDOWS_LAYOUT, StatusLayout, get_layout
from .obituary import ChildStatus, decode

__all__ = [
    "exited_normally",
    "exit_code",
    "terminated_by_signal",
    "terminating_signal",
    "core_dumped",
    "StatusLayout",
    "HOST_LAYOUT",
    "POSIX_LAYOUT",
    "WINDOWS_LAYOUT",
    "get_layout",
    "ChildStatus",
    "decode",
]

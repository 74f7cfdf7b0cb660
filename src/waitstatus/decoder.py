"""Decode the status word returned by os.wait(), os.waitpid() and os.wait4().

Each query is a plain bit projection over the status integer. None of them
validate their input or raise: calling exit_code() on a status that did not
exit normally, or terminating_signal()/core_dumped() on one that was not
killed by a signal, returns whatever those bits hold. Gate on
exited_normally() or terminated_by_signal() first.
"""

from .layout import HOST_LAYOUT, StatusLayout


def exited_normally(status: int, layout: StatusLayout = HOST_LAYOUT) -> bool:
    """True if the child terminated through exit(), _exit() or returning from main()."""
    return (status & layout.signal_mask) == 0


def exit_code(status: int, layout: StatusLayout = HOST_LAYOUT) -> int:
    """
    Low 8 bits of the value the child passed to exit().

    Only meaningful when exited_normally(status) is true.
    """
    return (status >> layout.exit_shift) & layout.exit_mask


def terminated_by_signal(status: int, layout: StatusLayout = HOST_LAYOUT) -> bool:
    """True if the child was terminated by a signal it did not handle."""
    sig = status & layout.signal_mask
    return sig != 0 and sig != layout.stopped_value


def terminating_signal(status: int, layout: StatusLayout = HOST_LAYOUT) -> int:
    """
    Number of the signal that terminated the child.

    Only meaningful when terminated_by_signal(status) is true.
    """
    return status & layout.signal_mask


def core_dumped(status: int, layout: StatusLayout = HOST_LAYOUT) -> bool:
    """
    True if termination produced a core dump.

    Only meaningful when terminated_by_signal(status) is true. Always false
    on hosts whose layout has no core flag.
    """
    return (status & layout.core_flag) != 0

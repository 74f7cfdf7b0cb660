"""Run a command as a child process and decode how it ended."""

import logging
import os
import sys

from .errors import RunnerError
from .layout import HOST_LAYOUT, StatusLayout
from .obituary import ChildStatus, decode

logger = logging.getLogger(__name__)


# Exit codes used by the child when exec fails, matching POSIX shells
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


class Runner:
    """Fork, exec and wait for a single command."""

    def __init__(self, layout: StatusLayout = HOST_LAYOUT):
        self.layout = layout
        self.child_pid: int | None = None

    def run(self, command: list[str]) -> ChildStatus:
        """
        Run a command and wait for it to terminate.

        Args:
            command: Program and arguments, looked up on PATH

        Returns:
            ChildStatus: How the child ended

        Raises:
            RunnerError: If the command is empty or the child cannot be forked
        """
        if not command:
            raise RunnerError("missing command")

        try:
            self.child_pid = os.fork()
        except OSError as e:
            raise RunnerError(f"Failed to fork for {command[0]}: {e}")

        if self.child_pid == 0:
            try:
                self._exec_child(command)
            finally:
                os._exit(EXIT_NOT_EXECUTABLE)

        logger.debug(f"Started {command!r} as pid {self.child_pid}")
        return self._wait()

    def _exec_child(self, command: list[str]) -> None:
        """Execute the command in the child process."""
        try:
            os.execvp(command[0], command)
        except FileNotFoundError:
            print(f"waitstatus: command not found: {command[0]}", file=sys.stderr)
            os._exit(EXIT_NOT_FOUND)
        except PermissionError:
            print(f"waitstatus: permission denied: {command[0]}", file=sys.stderr)
            os._exit(EXIT_NOT_EXECUTABLE)
        except BaseException as e:
            # Anything else (NUL bytes, non-str args) must not unwind into the caller
            print(f"waitstatus: {command[0]!r}: {e}", file=sys.stderr)
            os._exit(EXIT_NOT_EXECUTABLE)

    def _wait(self) -> ChildStatus:
        """Block until the child terminates and decode its status."""
        try:
            _, status = os.waitpid(self.child_pid, 0)
        except ChildProcessError as e:
            raise RunnerError(f"Lost track of child {self.child_pid}: {e}")

        result = decode(status, self.layout)
        if result.exited and result.exit_code == 0:
            logger.info(f"Child {self.child_pid} {result.describe()}")
        else:
            logger.warning(
                f"Child {self.child_pid} {result.describe()} (raw status {status:#06x})"
            )
        return result

"""Start the browser process."""

from __future__ import annotations

import subprocess
import sys

from privy.core.quoting import quote_argument, split_arguments


class ProcessLauncher:
    """Starts the browser detached from Privy, without a shell."""

    def __init__(self, platform: str | None = None):
        self.platform = platform or sys.platform

    def launch(self, executable: str, arguments: str) -> None:
        """Start executable with an argument string built by quote_argument.

        On POSIX the string is split back into an argv with split_arguments.
        A URL ending in a backslash reaches the browser with a trailing '"'
        in place of the backslash, the same reading Windows gives the
        command line.

        Raises OSError if the process cannot be started.
        """
        if self.platform == "win32":
            # Windows takes the command line as one string
            command_line = f"{quote_argument(executable)} {arguments}".rstrip()
            subprocess.Popen(
                command_line,
                creationflags=subprocess.DETACHED_PROCESS
                | subprocess.CREATE_NEW_PROCESS_GROUP,
                close_fds=True,
            )
            return

        subprocess.Popen(
            [executable, *split_arguments(arguments)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )

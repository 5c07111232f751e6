"""Grapheme-to-phoneme conversion through an interactive seq2seq program."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

DEFAULT_EXECUTABLE = "./g2p_seq2seq_pyinstaller_linux_64"

_READ_SIZE = 256
_MAX_WORD_BYTES = 254


def _parse_reply(reply: str) -> str:
    """Take the phonemes from the last prompt line, e.g. "> s A l A m"."""
    body = reply[:-1]
    line_start = body.rfind("\n") + 1
    # skip the prompt character and the blank after it, then every other blank
    return reply[line_start + 2::2]


class G2PProcess:
    """A running g2p program fed one word per line on its standard input."""

    def __init__(
        self, executable: str | os.PathLike[str] | Sequence[str] = DEFAULT_EXECUTABLE
    ) -> None:
        if isinstance(executable, (str, os.PathLike)):
            self.command = [os.fspath(executable)]
        else:
            self.command = [os.fspath(part) for part in executable]
        self._process: subprocess.Popen[bytes] | None = None

    @property
    def running(self) -> bool:
        return self._process is not None and self._process.poll() is None

    def load_model(self, model: str | os.PathLike[str]) -> None:
        """Start the program in interactive mode with the given model.

        Raises OSError when the program cannot be started.
        """
        self.close()
        self._process = subprocess.Popen(
            [*self.command, "--interactive", "--model", os.fspath(model)],
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            bufsize=0,
        )

    def convert(self, word: str) -> str:
        """The phonemes of ``word``, or "" when there is no answer."""
        process = self._process
        if process is None or not word:
            return ""
        assert process.stdin is not None and process.stdout is not None
        request = word.encode("utf-8")[:_MAX_WORD_BYTES] + b"\n"
        try:
            process.stdin.write(request)
            reply = os.read(process.stdout.fileno(), _READ_SIZE)
        except OSError:
            return ""
        if not reply:
            return ""
        return _parse_reply(reply.decode("utf-8", errors="replace"))

    def close(self) -> None:
        """Ask the program to finish, then stop it."""
        process = self._process
        if process is None:
            return
        self._process = None
        assert process.stdin is not None and process.stdout is not None
        try:
            process.stdin.write(b"\n")
        except OSError:
            pass
        for stream in (process.stdin, process.stdout):
            try:
                stream.close()
            except OSError:
                pass
        process.terminate()
        process.wait()

    def __enter__(self) -> G2PProcess:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
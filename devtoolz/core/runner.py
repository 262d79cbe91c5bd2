"""External command execution."""

import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from loguru import logger

# Characters of decoded output kept on the result; the full stream is still read into memory.
MAX_OUTPUT_CHARS = 1000 * 1024


@dataclass
class CommandResult:
    """Outcome of a single external invocation."""
    output: str = ""
    stderr: str = ""
    returncode: Optional[int] = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CommandRunner(Protocol):
    """Anything able to run an external command and wait for it."""

    def run(self, command: str, args: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        ...


def _tail(text: str) -> str:
    if len(text) > MAX_OUTPUT_CHARS:
        return text[-MAX_OUTPUT_CHARS:]
    return text


class SubprocessRunner:
    """Run commands with :func:`subprocess.run`, one at a time.

    Output is decoded as UTF-8 with undecodable bytes replaced, since build
    tools often write in the console code page.
    """

    def run(self, command: str, args: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        argv = [command, *args]
        logger.debug("Running {} (cwd={})", " ".join(argv), cwd or ".")

        try:
            proc = subprocess.run(
                argv, cwd=cwd, capture_output=True, text=True, encoding="utf-8", errors="replace"
            )
        except OSError as e:
            logger.debug("Could not start {}: {}", command, e)
            return CommandResult(returncode=None, error=f"{command}: {e.strerror or e}")

        output, stderr = _tail(proc.stdout or ""), _tail(proc.stderr or "")
        logger.debug("{} exited with {}", command, proc.returncode)

        if proc.returncode != 0:
            message = stderr.strip() or f"Command failed ({proc.returncode}): {' '.join(argv)}"
            return CommandResult(output=output, stderr=stderr, returncode=proc.returncode, error=message)

        return CommandResult(output=output, stderr=stderr, returncode=proc.returncode)

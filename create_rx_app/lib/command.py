from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    """Blocking command execution capability."""

    def run(self, argv: Sequence[str], *, cwd: str | None = None, capture: bool = True) -> CmdResult:
        ...


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    cwd: str | None = None,
    capture: bool = True,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - capture=False streams output to the terminal (stdout/stderr are empty).
    - Never raises on a non-zero exit; callers decide what is fatal.
    """

    argv_list = list(argv)
    logger.info("CMD %s", fmt_argv(argv_list))

    # npm is a .cmd shim on Windows; resolve it so no shell is needed.
    exe = shutil.which(argv_list[0]) if argv_list else None
    real_argv = [exe, *argv_list[1:]] if exe else argv_list

    if capture:
        p = subprocess.run(
            real_argv,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=cwd,
        )
    else:
        p = subprocess.run(real_argv, cwd=cwd)

    if p.stdout:
        logger.debug("STDOUT %s", p.stdout.strip())
    if p.stderr:
        logger.debug("STDERR %s", p.stderr.strip())
    if p.returncode != 0:
        logger.warning("Command exited with %s: %s", p.returncode, fmt_argv(argv_list))

    return CmdResult(
        argv=argv_list,
        returncode=p.returncode,
        stdout=p.stdout or "",
        stderr=p.stderr or "",
    )


class SubprocessRunner:
    def run(self, argv: Sequence[str], *, cwd: str | None = None, capture: bool = True) -> CmdResult:
        return run_cmd(argv, cwd=cwd, capture=capture)

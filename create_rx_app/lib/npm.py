from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Sequence

from rich.console import Console

from .. import ui
from ..errors import InstallerError, MissingPeerDependencyError
from .command import CommandRunner, fmt_argv

logger = logging.getLogger(__name__)


def build_install_argv(
    deps: Mapping[str, str],
    *,
    flags: Sequence[str],
    options: Sequence[str] = (),
    executable: str = "npm",
) -> list[str]:
    packages = [f"{name}@{spec}" for name, spec in deps.items()]
    return [executable, "install", *packages, *flags, *options]


def npm_install(
    deps: Mapping[str, str],
    description: str,
    *,
    runner: CommandRunner,
    cwd: Path,
    console: Console,
    flags: Sequence[str],
    options: Sequence[str] = (),
    executable: str = "npm",
) -> None:
    """Install one dependency group. A non-zero exit is fatal."""

    argv = build_install_argv(deps, flags=flags, options=options, executable=executable)

    ui.heading(console, f"\nInstalling {description}. This might take a couple minutes.")
    ui.command(console, fmt_argv(argv))

    r = runner.run(argv, cwd=str(cwd), capture=False)
    if r.returncode != 0:
        logger.error("npm install of %s failed with exit code %s", description, r.returncode)
        raise InstallerError(description, r.returncode)


def check_peer_dependencies(
    peers: Mapping[str, str],
    required: Sequence[str],
    *,
    package: str = "ReactXP",
) -> None:
    if not peers:
        raise MissingPeerDependencyError(list(required), package=package)
    for name in required:
        if not peers.get(name):
            raise MissingPeerDependencyError([name], package=package)

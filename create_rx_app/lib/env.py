from __future__ import annotations

import getpass
import logging
import os
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Folders:
    common: str = "common"
    keys: str = "keys"
    windows: str = "windows"
    node_modules: str = "node_modules"


FOLDERS = Folders()


def host_platform() -> str:
    return sys.platform


def is_windows(platform: str) -> bool:
    return platform == "win32"


def current_user() -> str:
    """OS user name, or "" when the host cannot tell (no passwd entry)."""

    try:
        return getpass.getuser()
    except (KeyError, OSError, ImportError):
        logger.warning("Unable to determine current user; using empty name")
        return os.environ.get("USERNAME", "")

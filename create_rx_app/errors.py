from __future__ import annotations

from typing import Sequence


class ConfigError(ValueError):
    pass


class GenerationAborted(RuntimeError):
    """Fatal, expected condition. The CLI reports it and exits with 1."""


class InstallerError(GenerationAborted):
    def __init__(self, description: str, returncode: int) -> None:
        self.description = description
        self.returncode = returncode
        super().__init__(f"NPM Error: could not install {description}. Aborting.")


class MissingPeerDependencyError(GenerationAborted):
    def __init__(self, missing: Sequence[str], *, package: str = "ReactXP") -> None:
        self.missing = list(missing)
        if len(self.missing) == 1:
            msg = f"Missing {self.missing[0]} peer dependency in {package}'s package.json. Aborting"
        else:
            msg = f"Missing {'/'.join(self.missing)} peer dependencies in {package}'s package.json. Aborting"
        super().__init__(msg)

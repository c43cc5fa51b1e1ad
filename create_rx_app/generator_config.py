from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .errors import ConfigError

DEFAULT_BINARY_EXTENSIONS = [".png", ".jpg", ".jar", ".ico", ".pfx"]
DEFAULT_IGNORE_PATHS = ["_package.json"]
DEFAULT_PATH_RENAMES = {
    "_eslintrc": ".eslintrc",
    "_gitignore": ".gitignore",
    "_tsconfig.json": "tsconfig.json",
    "_tslint.json": "tslint.json",
}
DEFAULT_REQUIRED_PEERS = ["react", "react-dom", "react-native", "react-native-windows"]
DEFAULT_INSTALL_FLAGS = ["--save-exact", "--ignore-scripts"]


def _repo_root() -> Path:
    # create_rx_app/generator_config.py -> create_rx_app -> repo root
    return Path(__file__).resolve().parents[1]


@dataclass(frozen=True)
class GeneratorConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def template_root(self) -> Path:
        return Path(self.raw.get("template_root") or (_repo_root() / "template"))

    @property
    def binary_extensions(self) -> List[str]:
        return [str(e).lower() for e in (self.raw.get("binary_extensions") or DEFAULT_BINARY_EXTENSIONS)]

    @property
    def ignore_paths(self) -> List[str]:
        return list(self.raw.get("ignore_paths") or DEFAULT_IGNORE_PATHS)

    @property
    def path_renames(self) -> Dict[str, str]:
        return dict(self.raw.get("path_renames") or DEFAULT_PATH_RENAMES)

    @property
    def framework_package(self) -> str:
        return str(((self.raw.get("npm") or {}).get("framework_package")) or "reactxp")

    @property
    def required_peer_dependencies(self) -> List[str]:
        return list(((self.raw.get("npm") or {}).get("required_peers")) or DEFAULT_REQUIRED_PEERS)

    @property
    def install_flags(self) -> List[str]:
        return list(((self.raw.get("npm") or {}).get("install_flags")) or DEFAULT_INSTALL_FLAGS)

    @property
    def npm_executable(self) -> str:
        return str(((self.raw.get("npm") or {}).get("executable")) or "npm")


def load_generator_config(path: str | None) -> GeneratorConfig:
    if path is None:
        return GeneratorConfig()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError("generator config must be YAML")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{p.name} must contain a mapping/object")

    return GeneratorConfig(raw=raw)

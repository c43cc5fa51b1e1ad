from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .env import FOLDERS

logger = logging.getLogger(__name__)

BASE_MANIFEST_NAME = "_package.json"
MANIFEST_NAME = "package.json"


def _load_json_object(p: Path) -> Dict[str, Any]:
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Manifest must be an object/dict: {p}")
    return data


def load_base_manifest(template_root: Path, source_type: str) -> Mapping[str, Any]:
    """Load <template>/<variant>/_package.json as a read-only mapping."""

    p = template_root / source_type / BASE_MANIFEST_NAME
    logger.info("Loading base manifest %s", p)
    return MappingProxyType(_load_json_object(p))


def build_final_manifest(base: Mapping[str, Any], project_name: str) -> Dict[str, Any]:
    return {
        **base,
        "dependencies": {},
        "devDependencies": {},
        "name": project_name.lower(),
    }


def write_manifest(project_path: Path, manifest: Mapping[str, Any]) -> Path:
    p = project_path / MANIFEST_NAME
    p.write_text(json.dumps(dict(manifest), indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote %s", p)
    return p


def read_peer_dependencies(project_path: Path, package: str) -> Dict[str, str]:
    """Peer dependencies declared by an installed package (empty if none)."""

    p = project_path / FOLDERS.node_modules / package / MANIFEST_NAME
    peers = _load_json_object(p).get("peerDependencies") or {}
    return dict(peers)

"""Shared fixtures: a small template tree and a fake command runner."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest
from rich.console import Console

from create_rx_app.lib.command import CmdResult

PNG_BYTES = b"\x89PNG\r\n\x1a\n{{DisplayName}}\x00\xff"
PFX_BYTES = b"0\x82\x0a\x00default-key{{projectGuid}}"

REQUIRED_PEERS = {
    "react": "16.4.1",
    "react-dom": "16.4.1",
    "react-native": "0.55.4",
    "react-native-windows": "0.55.0",
}


def _write(path: Path, content, mode: Optional[int] = None) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    if mode is not None:
        path.chmod(mode)


def _base_manifest(variant: str) -> Dict[str, object]:
    return {
        "name": "_",
        "version": "0.0.1",
        "private": True,
        "scripts": {"start:web": "webpack-dev-server", "build:web": "webpack"},
        "dependencies": {"reactxp": "1.3.0"},
        "devDependencies": {variant: "3.0.1", "webpack": "4.16.0"},
    }


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    root = tmp_path / "template"

    _write(root / "common" / "_gitignore", "node_modules/\n")
    _write(root / "common" / "_eslintrc", '{ "extends": "eslint:recommended" }\n')
    _write(root / "common" / "index.html", "<title>{{DisplayName}}</title>\n")
    _write(root / "common" / "assets" / "icon.png", PNG_BYTES)
    _write(root / "common" / "scripts" / "run.sh", "#!/bin/sh\necho {{projecttemplate}}\n", mode=0o755)
    _write(
        root / "common" / "ios" / "ProjectTemplate" / "ProjectTemplate-Info.plist",
        "<string>{{DisplayName}}</string>\n",
    )
    _write(
        root / "common" / "windows" / "ProjectTemplate" / "Package.appxmanifest",
        '<Identity Name="{{packageGuid}}" Publisher="CN={{currentUser}}" />\n'
        "<Thumbprint>{{certificateThumbprint}}</Thumbprint>\n",
    )

    _write(root / "typescript" / "_package.json", json.dumps(_base_manifest("typescript"), indent=2))
    _write(root / "typescript" / "_tsconfig.json", '{ "compilerOptions": {} }\n')
    _write(root / "typescript" / "_tslint.json", "{}\n")
    _write(root / "typescript" / "src" / "App.tsx", "// {{ProjectTemplate}} app\n")

    _write(root / "javascript" / "_package.json", json.dumps(_base_manifest("babel"), indent=2))
    _write(root / "javascript" / "src" / "App.js", "// {{ProjectTemplate}} app\n")

    _write(root / "keys" / "windows" / "ProjectTemplate" / "ProjectTemplate_TemporaryKey.pfx", PFX_BYTES)
    return root


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, highlight=False)


def console_text(console: Console) -> str:
    return console.file.getvalue()


class FakeRunner:
    """Records commands; simulates npm installing the framework package."""

    def __init__(
        self,
        *,
        peers: Optional[Dict[str, str]] = None,
        fail_on: Optional[str] = None,
        powershell: Optional[CmdResult] = None,
        framework: str = "reactxp",
    ) -> None:
        self.peers = dict(REQUIRED_PEERS) if peers is None else peers
        self.fail_on = fail_on
        self.powershell = powershell
        self.framework = framework
        self.calls: List[List[str]] = []
        self.cwds: List[Optional[str]] = []

    @property
    def npm_calls(self) -> List[List[str]]:
        return [c for c in self.calls if c[:2] == ["npm", "install"]]

    def run(self, argv: Sequence[str], *, cwd: Optional[str] = None, capture: bool = True) -> CmdResult:
        argv_list = list(argv)
        self.calls.append(argv_list)
        self.cwds.append(cwd)

        if argv_list[0] == "powershell":
            return self.powershell or CmdResult(argv=argv_list, returncode=1, stdout="", stderr="denied")

        if self.fail_on and any(a.startswith(self.fail_on) for a in argv_list):
            return CmdResult(argv=argv_list, returncode=1, stdout="", stderr="")

        if cwd and any(a.startswith(f"{self.framework}@") for a in argv_list):
            pkg = Path(cwd) / "node_modules" / self.framework / "package.json"
            manifest: Dict[str, object] = {"name": self.framework, "version": "1.3.0"}
            if self.peers:
                manifest["peerDependencies"] = self.peers
            _write(pkg, json.dumps(manifest))

        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()

from __future__ import annotations

import os
import stat
from pathlib import Path

from conftest import PNG_BYTES

from create_rx_app.generator_config import DEFAULT_BINARY_EXTENSIONS, DEFAULT_PATH_RENAMES
from create_rx_app.lib.assets import build_dest_path, copy_entry, is_binary, materialize, walk
from create_rx_app.lib.placeholders import path_patterns


def test_walk_lists_parents_before_children(template_root: Path) -> None:
    paths = walk(template_root / "common")
    rel = [p.relative_to(template_root / "common").as_posix() for p in paths]

    assert "." not in rel
    assert rel.index("ios") < rel.index("ios/ProjectTemplate") < rel.index(
        "ios/ProjectTemplate/ProjectTemplate-Info.plist"
    )
    assert "assets/icon.png" in rel


def test_walk_excludes_ignored_substrings(template_root: Path) -> None:
    paths = walk(template_root / "typescript", ["_package.json"])
    assert paths
    assert all("_package.json" not in str(p) for p in paths)
    assert template_root / "typescript" / "_tsconfig.json" in paths


def test_walk_skips_whole_ignored_directory(template_root: Path) -> None:
    paths = walk(template_root / "common", [os.path.join("common", "ios")])
    rel = [p.relative_to(template_root / "common").as_posix() for p in paths]
    assert rel
    assert all(not r.startswith("ios") for r in rel)
    assert template_root / "common" / "index.html" in paths


def test_walk_handles_deep_trees(tmp_path: Path) -> None:
    root = tmp_path / "deep"
    current = root
    for i in range(300):
        current = current / f"d{i}"
    current.mkdir(parents=True)
    (current / "leaf.txt").write_text("x")

    paths = walk(root)
    assert len(paths) == 301
    assert paths[-1].name == "leaf.txt"


def test_is_binary_by_extension() -> None:
    assert is_binary(Path("a/icon.png"), DEFAULT_BINARY_EXTENSIONS)
    assert is_binary(Path("a/KEY.PFX"), DEFAULT_BINARY_EXTENSIONS)
    assert not is_binary(Path("a/App.tsx"), DEFAULT_BINARY_EXTENSIONS)


def test_build_dest_path_only_rewrites_relative_part(tmp_path: Path) -> None:
    src_root = tmp_path / "ProjectTemplate" / "common"
    project = tmp_path / "out" / "_gitignore_project"
    patterns = path_patterns("MyApp", DEFAULT_PATH_RENAMES)

    dest = build_dest_path(src_root, src_root / "ProjectTemplate" / "_gitignore", project, patterns)
    assert dest == project / "MyApp" / ".gitignore"


def test_copy_entry_binary_is_byte_identical(template_root: Path, tmp_path: Path) -> None:
    src = template_root / "common" / "assets" / "icon.png"
    dest = tmp_path / "icon.png"
    copy_entry(src, dest, {"DisplayName": "MyApp"}, DEFAULT_BINARY_EXTENSIONS)
    assert dest.read_bytes() == PNG_BYTES


def test_copy_entry_text_keeps_mode(template_root: Path, tmp_path: Path) -> None:
    src = template_root / "common" / "scripts" / "run.sh"
    dest = tmp_path / "run.sh"
    copy_entry(src, dest, {"projecttemplate": "myapp"}, DEFAULT_BINARY_EXTENSIONS)
    assert dest.read_text(encoding="utf-8") == "#!/bin/sh\necho myapp\n"
    assert stat.S_IMODE(dest.stat().st_mode) == 0o755


def test_copy_entry_directory_is_noop_when_present(tmp_path: Path) -> None:
    src = tmp_path / "src"
    src.mkdir()
    dest = tmp_path / "dest"
    dest.mkdir()
    (dest / "keep.txt").write_text("k")

    copy_entry(src, dest, {}, DEFAULT_BINARY_EXTENSIONS)
    assert (dest / "keep.txt").read_text() == "k"


def test_materialize_renames_at_every_depth(template_root: Path, tmp_path: Path) -> None:
    project = tmp_path / "MyApp"
    project.mkdir()

    written = materialize(
        [template_root / "common", template_root / "typescript"],
        project,
        path_patterns=path_patterns("MyApp", DEFAULT_PATH_RENAMES),
        content_patterns={"DisplayName": "MyApp", "ProjectTemplate": "MyApp"},
        ignore_paths=["_package.json"],
        binary_extensions=DEFAULT_BINARY_EXTENSIONS,
    )

    assert (project / ".gitignore").exists()
    assert (project / ".eslintrc").exists()
    assert (project / "tsconfig.json").exists()
    assert (project / "tslint.json").exists()
    assert (project / "ios" / "MyApp" / "MyApp-Info.plist").read_text() == "<string>MyApp</string>\n"
    assert (project / "src" / "App.tsx").read_text() == "// MyApp app\n"
    assert not (project / "_package.json").exists()
    assert not (project / "package.json").exists()
    assert all("ProjectTemplate" not in p.as_posix() for p in written)


def test_copy_entry_binary_keeps_mode(template_root: Path, tmp_path: Path) -> None:
    src = template_root / "common" / "assets" / "icon.png"
    src.chmod(0o640)
    dest = tmp_path / "icon.png"
    copy_entry(src, dest, {}, DEFAULT_BINARY_EXTENSIONS)
    assert stat.S_IMODE(dest.stat().st_mode) == 0o640
    assert dest.read_bytes() == PNG_BYTES


def test_copy_entry_keeps_crlf_line_endings(tmp_path: Path) -> None:
    src = tmp_path / "ProjectTemplate.sln"
    src.write_bytes(b'Project("{{projectGuid}}") = "{{ProjectTemplate}}"\r\nEndProject\r\n')
    dest = tmp_path / "MyApp.sln"

    copy_entry(src, dest, {"projectGuid": "G", "ProjectTemplate": "MyApp"}, DEFAULT_BINARY_EXTENSIONS)
    assert dest.read_bytes() == b'Project("G") = "MyApp"\r\nEndProject\r\n'


def test_copy_entry_keeps_lf_line_endings(tmp_path: Path) -> None:
    src = tmp_path / "App.tsx"
    src.write_bytes(b"// {{ProjectTemplate}}\nexport {};\n")
    dest = tmp_path / "out.tsx"

    copy_entry(src, dest, {"ProjectTemplate": "MyApp"}, DEFAULT_BINARY_EXTENSIONS)
    assert dest.read_bytes() == b"// MyApp\nexport {};\n"

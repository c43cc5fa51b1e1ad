from __future__ import annotations

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Iterable, List, Sequence

from .placeholders import PlaceholderMap, apply_path_patterns, render_content

logger = logging.getLogger(__name__)


def is_ignored(path: Path, ignore_paths: Sequence[str]) -> bool:
    s = str(path)
    return any(p in s for p in ignore_paths)


def walk(root: Path, ignore_paths: Sequence[str] = ()) -> List[Path]:
    """List every path under root (root excluded), parents before children.

    Uses an explicit stack; children are visited in name order. Ignored
    directories are not descended into, since every child path contains the
    ignored substring too.
    """

    out: List[Path] = []
    stack = [root]
    while stack:
        current = stack.pop()
        if current != root:
            if is_ignored(current, ignore_paths):
                continue
            out.append(current)
        if current.is_dir() and not current.is_symlink():
            stack.extend(sorted(current.iterdir(), key=lambda c: c.name, reverse=True))
    return out


def is_binary(path: Path, binary_extensions: Iterable[str]) -> bool:
    return path.suffix.lower() in set(binary_extensions)


def build_dest_path(src_root: Path, path: Path, project_path: Path, patterns: PlaceholderMap) -> Path:
    rel = path.relative_to(src_root).as_posix()
    return project_path / apply_path_patterns(rel, patterns)


def copy_entry(
    src: Path,
    dest: Path,
    patterns: PlaceholderMap,
    binary_extensions: Iterable[str],
) -> None:
    if src.is_dir():
        dest.mkdir(exist_ok=True)
        return

    mode = stat.S_IMODE(src.stat().st_mode)
    if is_binary(src, binary_extensions):
        shutil.copyfile(src, dest)
    else:
        # Bytes in and out: no newline translation on any host.
        content = render_content(src.read_bytes().decode("utf-8"), patterns)
        dest.write_bytes(content.encode("utf-8"))
    os.chmod(dest, mode)


def materialize(
    src_roots: Sequence[Path],
    project_path: Path,
    *,
    path_patterns: PlaceholderMap,
    content_patterns: PlaceholderMap,
    ignore_paths: Sequence[str],
    binary_extensions: Iterable[str],
) -> List[Path]:
    """Copy each source tree into project_path, renaming and substituting."""

    written: List[Path] = []
    for src_root in src_roots:
        if not src_root.exists():
            raise FileNotFoundError(str(src_root))
        logger.info("Materializing %s -> %s", src_root, project_path)
        for path in walk(src_root, ignore_paths):
            dest = build_dest_path(src_root, path, project_path, path_patterns)
            copy_entry(path, dest, content_patterns, binary_extensions)
            written.append(dest)
    logger.info("Materialized %d paths", len(written))
    return written

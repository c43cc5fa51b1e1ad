from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import List

from .. import ui
from ..lib.assets import materialize
from ..lib.certificate import build_windows_certificate
from ..lib.env import FOLDERS
from ..lib.placeholders import content_patterns, path_patterns
from ..pipeline import GenerationContext, GenerationState, Stage

logger = logging.getLogger(__name__)


class MaterializeTreeStep:
    step_id = "30_materialize_tree"

    def source_folders(self, ctx: GenerationContext, thumbprint: str) -> List[Path]:
        req = ctx.request
        folders = [FOLDERS.common, req.source_type.value]
        if not thumbprint:
            folders.append(FOLDERS.keys)
        return [req.template_root / f for f in folders]

    def run(self, ctx: GenerationContext, state: GenerationState) -> GenerationState:
        req = ctx.request
        cfg = ctx.config

        thumbprint = build_windows_certificate(
            req.project_path,
            req.project_name,
            runner=ctx.runner,
            console=ctx.console,
            platform=ctx.platform,
            user=ctx.user,
        )
        if not thumbprint:
            ui.warn(ctx.console, "[windows] Using Default Certificate. Use Visual Studio to renew it.")

        written = materialize(
            self.source_folders(ctx, thumbprint),
            req.project_path,
            path_patterns=path_patterns(req.project_name, cfg.path_renames),
            content_patterns=content_patterns(
                req.project_name,
                current_user=ctx.user,
                certificate_thumbprint=thumbprint,
            ),
            ignore_paths=cfg.ignore_paths,
            binary_extensions=cfg.binary_extensions,
        )
        return replace(
            state,
            stage=Stage.TREE_MATERIALIZED,
            certificate_thumbprint=thumbprint,
            materialized=tuple(written),
        )

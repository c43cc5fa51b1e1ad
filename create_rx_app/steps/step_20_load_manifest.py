from __future__ import annotations

import logging
from dataclasses import replace

from ..lib.manifest import load_base_manifest
from ..pipeline import GenerationContext, GenerationState, Stage

logger = logging.getLogger(__name__)


class LoadManifestStep:
    step_id = "20_load_manifest"

    def run(self, ctx: GenerationContext, state: GenerationState) -> GenerationState:
        req = ctx.request
        base = load_base_manifest(req.template_root, req.source_type.value)
        logger.info(
            "Base manifest has %d dependencies, %d devDependencies",
            len(base.get("dependencies") or {}),
            len(base.get("devDependencies") or {}),
        )
        return replace(state, stage=Stage.MANIFEST_LOADED, base_manifest=base)

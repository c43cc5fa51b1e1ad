from __future__ import annotations

import logging
from dataclasses import replace

from ..lib.manifest import build_final_manifest, write_manifest
from ..pipeline import GenerationContext, GenerationState, Stage

logger = logging.getLogger(__name__)


class WriteManifestStep:
    step_id = "40_write_manifest"

    def run(self, ctx: GenerationContext, state: GenerationState) -> GenerationState:
        if state.base_manifest is None:
            raise RuntimeError("base manifest not loaded")

        req = ctx.request
        final = build_final_manifest(state.base_manifest, req.project_name)
        path = write_manifest(req.project_path, final)
        logger.info("Manifest for %s written to %s", final["name"], path)
        return replace(state, stage=Stage.MANIFEST_WRITTEN, manifest_path=path)

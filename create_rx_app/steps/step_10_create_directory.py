from __future__ import annotations

import logging
from dataclasses import replace

from .. import ui
from ..pipeline import GenerationContext, GenerationState, Stage

logger = logging.getLogger(__name__)


class CreateDirectoryStep:
    step_id = "10_create_directory"

    def run(self, ctx: GenerationContext, state: GenerationState) -> GenerationState:
        project_path = ctx.request.project_path
        ui.heading(ctx.console, f"Setting up new ReactXP app in {project_path}")

        # No parents, no exist_ok: an existing directory is fatal.
        project_path.mkdir()
        logger.info("Created %s", project_path)
        return replace(state, stage=Stage.DIR_CREATED)

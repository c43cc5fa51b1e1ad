from __future__ import annotations

import logging
import os
from dataclasses import replace

from .. import ui
from ..pipeline import GenerationContext, GenerationState, Stage

logger = logging.getLogger(__name__)


class PrintInstructionsStep:
    step_id = "60_print_instructions"

    def run(self, ctx: GenerationContext, state: GenerationState) -> GenerationState:
        c = ctx.console
        name = ctx.request.project_name
        path = str(ctx.request.project_path)
        xcode_project = os.path.join("ios", f"{name}.xcodeproj")

        ui.success(c, f"{name} was successfully created. \n")

        ui.success(c, "To run your app on Web:")
        ui.plain(c, f"  cd {path}")
        ui.heading(c, "  npm run start:web \n")

        ui.success(c, "To build Web production version of your app:")
        ui.plain(c, f"  cd {path}")
        ui.heading(c, "  npm run build:web \n")

        ui.success(c, "To run your app on iOS:")
        ui.plain(c, f"  cd {path}")
        ui.heading(c, "  npm run start:ios")
        ui.plain(c, "  - or -")
        ui.plain(c, f"  open {xcode_project} project in Xcode")
        ui.plain(c, "  press the Run button \n")

        ui.success(c, "To run your app on Android:")
        ui.plain(c, f"  cd {path}")
        ui.plain(c, "  Have an Android emulator running (quickest way to get started), or a device connected.")
        ui.heading(c, "  npm run start:android")
        ui.plain(c, "  - or -")
        ui.heading(c, "  open android/ project in Android Studio")
        ui.plain(c, "  press the Run button \n")

        ui.success(c, "To run your app on Windows:")
        ui.plain(c, f"  cd {path}")
        ui.heading(c, "  npm run start:windows")

        logger.info("Generation of %s complete", name)
        return replace(state, stage=Stage.INSTRUCTIONS_PRINTED)

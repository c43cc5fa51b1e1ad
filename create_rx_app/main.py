from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console

from . import ui
from .generator_config import GeneratorConfig, load_generator_config
from .lib.command import CommandRunner, SubprocessRunner
from .lib.env import current_user, host_platform
from .logging_utils import configure_logging
from .pipeline import (
    GenerationContext,
    GenerationRequest,
    PipelineResult,
    SourceType,
    run_pipeline,
)
from .steps import (
    CreateDirectoryStep,
    InstallDependenciesStep,
    LoadManifestStep,
    MaterializeTreeStep,
    PrintInstructionsStep,
    WriteManifestStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        CreateDirectoryStep(),
        LoadManifestStep(),
        MaterializeTreeStep(),
        WriteManifestStep(),
        InstallDependenciesStep(),
        PrintInstructionsStep(),
    ]


def build_request(
    project_directory: str,
    *,
    template_root: Path,
    javascript: bool = False,
) -> GenerationRequest:
    project_path = Path(project_directory).expanduser().absolute()
    return GenerationRequest(
        template_root=template_root,
        project_name=project_path.name,
        project_path=project_path,
        source_type=SourceType.JAVASCRIPT if javascript else SourceType.TYPESCRIPT,
    )


def run(
    request: GenerationRequest,
    *,
    config: Optional[GeneratorConfig] = None,
    runner: Optional[CommandRunner] = None,
    console: Optional[Console] = None,
    platform: Optional[str] = None,
    user: Optional[str] = None,
) -> PipelineResult:
    """Generate one project. Collaborators default to the real host ones."""

    ctx = GenerationContext(
        request=request,
        config=config or GeneratorConfig(),
        runner=runner or SubprocessRunner(),
        console=console if console is not None else ui.make_console(),
        platform=platform or host_platform(),
        user=user or current_user(),
    )
    logger.info(
        "Generating %s (%s) from %s into %s",
        request.project_name,
        request.source_type.value,
        request.template_root,
        request.project_path,
    )
    return run_pipeline(ctx=ctx, steps=build_steps())


def main(
    argv: Optional[list[str]] = None,
    *,
    runner: Optional[CommandRunner] = None,
    console: Optional[Console] = None,
    platform: Optional[str] = None,
) -> int:
    p = argparse.ArgumentParser(prog="create-rx-app", description="Generate a new ReactXP app")
    p.add_argument("project_directory", help="Directory to create the app in; its name is the app name")
    p.add_argument("--javascript", action="store_true", help="Use the JavaScript template instead of TypeScript")
    p.add_argument("--template", default=None, help="Template root (common/, typescript/, javascript/, keys/)")
    p.add_argument("--config", default=None, help="Path to a YAML generator config")
    p.add_argument("--log", default=None, help="Write a diagnostic log to this file")
    p.add_argument("--verbose", action="store_true", help="Also log diagnostics to stderr")

    args = p.parse_args(argv)

    configure_logging(
        log_path=args.log,
        level=logging.DEBUG if args.verbose else logging.INFO,
        also_console=bool(args.verbose),
    )

    cfg = load_generator_config(args.config)
    template_root = Path(args.template) if args.template else cfg.template_root
    request = build_request(args.project_directory, template_root=template_root, javascript=args.javascript)

    if console is None:
        console = ui.make_console()
    result = run(request, config=cfg, runner=runner, console=console, platform=platform)
    if not result.ok:
        ui.error(console, str(result.error))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Protocol, Sequence, Tuple

from rich.console import Console

from .errors import GenerationAborted
from .generator_config import GeneratorConfig
from .lib.command import CommandRunner

logger = logging.getLogger(__name__)


class SourceType(str, enum.Enum):
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"


class Stage(str, enum.Enum):
    START = "start"
    DIR_CREATED = "dir_created"
    MANIFEST_LOADED = "manifest_loaded"
    TREE_MATERIALIZED = "tree_materialized"
    MANIFEST_WRITTEN = "manifest_written"
    DEPENDENCIES_INSTALLED = "dependencies_installed"
    INSTRUCTIONS_PRINTED = "instructions_printed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class GenerationRequest:
    template_root: Path
    project_name: str
    project_path: Path
    source_type: SourceType = SourceType.TYPESCRIPT


@dataclass(frozen=True)
class GenerationContext:
    request: GenerationRequest
    config: GeneratorConfig
    runner: CommandRunner
    console: Console
    platform: str
    user: str


@dataclass(frozen=True)
class GenerationState:
    stage: Stage = Stage.START
    base_manifest: Optional[Mapping[str, Any]] = None
    certificate_thumbprint: str = ""
    materialized: Tuple[Path, ...] = ()
    manifest_path: Optional[Path] = None
    peer_dependencies: Mapping[str, str] = field(default_factory=dict)


class Step(Protocol):
    """A single generation step; returns the next state."""

    step_id: str

    def run(self, ctx: GenerationContext, state: GenerationState) -> GenerationState:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: GenerationState
    ran_steps: List[str]
    failed_step: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_pipeline(
    *,
    ctx: GenerationContext,
    steps: Sequence[Step],
    state: Optional[GenerationState] = None,
) -> PipelineResult:
    """Run steps in order, stopping at the first fatal abort.

    GenerationAborted is turned into a result with Stage.ABORTED; anything
    else (filesystem errors included) propagates.
    """

    state = state or GenerationState()
    ran: List[str] = []

    for step in steps:
        logger.info("Running step %s", step.step_id)
        try:
            state = step.run(ctx, state)
        except GenerationAborted as e:
            logger.exception("Step %s aborted", step.step_id)
            return PipelineResult(
                state=replace(state, stage=Stage.ABORTED),
                ran_steps=ran,
                failed_step=step.step_id,
                error=e,
            )
        ran.append(step.step_id)
        logger.info("Step %s reached %s", step.step_id, state.stage.value)

    return PipelineResult(state=state, ran_steps=ran)

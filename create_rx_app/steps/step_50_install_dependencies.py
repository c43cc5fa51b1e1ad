from __future__ import annotations

import logging
from dataclasses import replace
from typing import Mapping

from ..lib.manifest import read_peer_dependencies
from ..lib.npm import check_peer_dependencies, npm_install
from ..pipeline import GenerationContext, GenerationState, Stage

logger = logging.getLogger(__name__)


class InstallDependenciesStep:
    step_id = "50_install_dependencies"

    def _install(
        self,
        ctx: GenerationContext,
        deps: Mapping[str, str],
        description: str,
        options: tuple[str, ...] = (),
    ) -> None:
        npm_install(
            deps,
            description,
            runner=ctx.runner,
            cwd=ctx.request.project_path,
            console=ctx.console,
            flags=ctx.config.install_flags,
            options=options,
            executable=ctx.config.npm_executable,
        )

    def run(self, ctx: GenerationContext, state: GenerationState) -> GenerationState:
        base = state.base_manifest or {}
        framework = ctx.config.framework_package

        self._install(ctx, base.get("devDependencies") or {}, "devDependencies", ("--save-dev",))
        self._install(ctx, base.get("dependencies") or {}, framework)

        peers = read_peer_dependencies(ctx.request.project_path, framework)
        logger.info("Peer dependencies of %s: %s", framework, peers)
        check_peer_dependencies(peers, ctx.config.required_peer_dependencies)

        self._install(ctx, peers, "peerDependencies")
        return replace(state, stage=Stage.DEPENDENCIES_INSTALLED, peer_dependencies=peers)

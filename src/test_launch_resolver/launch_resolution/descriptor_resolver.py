"""Launch descriptor resolution service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

from test_launch_resolver.argument_lookup.baseline_arguments import (
    ArgumentLookup,
    ArgumentQuery,
    BaselineArguments,
)
from test_launch_resolver.launch_overrides.override_models import (
    OverrideConfig,
    normalize_override,
)
from test_launch_resolver.naming.unique_tokens import TokenGenerator, generate_unique_token
from test_launch_resolver.run_requests.request_models import (
    ExecutionKind,
    ExecutionScope,
    RunRequest,
)
from test_launch_resolver.runners.runner_contracts import TestRunner

from .launch_descriptor import LaunchDescriptor

_LOGGER = logging.getLogger(__name__)

LAUNCH_NAME_PREFIX = "Launch Java Tests - "


@dataclass(frozen=True)
class _StandardFrameworkPlan:
    """JUnit rules: per-target lookup, everything else from the baseline."""

    argument_lookup: ArgumentLookup

    def fetch_baseline(self, request: RunRequest) -> BaselineArguments:
        start = end = None
        if (
            request.scope is ExecutionScope.METHOD
            and request.kind.supports_range_filtering
            and request.location is not None
        ):
            start, end = request.location.start, request.location.end
        return self.argument_lookup.lookup_execution_arguments(
            ArgumentQuery(
                test_uri=request.test_uri,
                class_name=request.class_name,
                method_name=request.method_name,
                project_name=request.project_name,
                scope=request.scope,
                kind=request.kind,
                start=start,
                end=end,
                is_hierarchical_package=request.is_hierarchical_package,
            )
        )

    def artifact_lookups(self, kind: ExecutionKind) -> tuple[Callable[[], str], ...]:
        return ()

    def main_class(self, baseline: BaselineArguments) -> str:
        return baseline.main_class

    def program_arguments(
        self, baseline: BaselineArguments, override: OverrideConfig | None
    ) -> tuple[str, ...]:
        return tuple(baseline.program_arguments)


@dataclass(frozen=True)
class _AlternateFrameworkPlan:
    """TestNG rules: project-only lookup, runner entry class, artifacts and arguments."""

    argument_lookup: ArgumentLookup
    runner: TestRunner

    def fetch_baseline(self, request: RunRequest) -> BaselineArguments:
        return self.argument_lookup.lookup_alternate_framework_arguments(request.project_name)

    def artifact_lookups(self, kind: ExecutionKind) -> tuple[Callable[[], str], ...]:
        return (
            lambda: self.runner.archive_path(kind),
            lambda: self.runner.library_path(kind),
        )

    def main_class(self, baseline: BaselineArguments) -> str:
        return self.runner.entry_class_name

    def program_arguments(
        self, baseline: BaselineArguments, override: OverrideConfig | None
    ) -> tuple[str, ...]:
        return tuple(self.runner.application_args(override))


_LaunchPlan = _StandardFrameworkPlan | _AlternateFrameworkPlan


def _plan_for(
    kind: ExecutionKind, argument_lookup: ArgumentLookup, runner: TestRunner | None
) -> _LaunchPlan:
    if kind.is_alternate_framework:
        if runner is None:
            raise ValueError(f"A test runner is required to launch {kind.value} tests.")
        return _AlternateFrameworkPlan(argument_lookup=argument_lookup, runner=runner)
    return _StandardFrameworkPlan(argument_lookup=argument_lookup)


class LaunchDescriptorResolver:
    """Merge baseline arguments, runner data and user overrides into a launch descriptor.

    Precedence, per descriptor field:
      * main class: runner entry class (TestNG) or baseline main class.
      * working directory: override ``workingDirectory``, override ``cwd``, baseline.
      * class paths: override entries, baseline entries, then runner archive and
        library (TestNG only).
      * module paths: override list replaces the baseline list when given.
      * args: runner-derived arguments (TestNG) or baseline program arguments.
      * VM args: baseline entries followed by non-empty override entries.
      * pass-through: non-reserved override keys are copied verbatim.

    The baseline lookup and runner artifact lookups run concurrently. Their
    errors propagate unchanged; no partial descriptor is produced.
    """

    def __init__(
        self,
        argument_lookup: ArgumentLookup,
        *,
        runner: TestRunner | None = None,
        token_generator: TokenGenerator | None = None,
    ) -> None:
        self._argument_lookup = argument_lookup
        self._runner = runner
        self._token_generator = token_generator or generate_unique_token

    def resolve(
        self, request: RunRequest, override: OverrideConfig | None = None
    ) -> LaunchDescriptor:
        plan = _plan_for(request.kind, self._argument_lookup, self._runner)
        _LOGGER.debug(
            "resolving %s launch for %s via %s",
            request.kind.value,
            request.full_name,
            type(plan).__name__,
        )
        baseline, artifacts = _fetch_concurrently(plan, request)
        normalized = normalize_override(override)

        descriptor = LaunchDescriptor(
            name=f"{LAUNCH_NAME_PREFIX}{self._token_generator()}",
            project_name=baseline.project_name,
            main_class=plan.main_class(baseline),
            cwd=normalized.working_directory or baseline.working_directory,
            class_paths=(*normalized.class_paths, *baseline.classpath, *artifacts),
            module_paths=(
                normalized.module_paths
                if normalized.module_paths is not None
                else tuple(baseline.modulepath)
            ),
            args=plan.program_arguments(baseline, override),
            vm_args=(*baseline.vm_arguments, *normalized.vm_args),
            no_debug=not request.is_debug,
            extras=normalized.extras,
        )
        if normalized.extras:
            _LOGGER.debug("passing through override keys: %s", sorted(normalized.extras))
        _LOGGER.debug("resolved launch descriptor %s", descriptor.name)
        return descriptor


def resolve_launch_descriptor(
    request: RunRequest,
    override: OverrideConfig | None = None,
    *,
    argument_lookup: ArgumentLookup,
    runner: TestRunner | None = None,
    token_generator: TokenGenerator | None = None,
) -> LaunchDescriptor:
    """Resolve one launch descriptor for a run request."""
    resolver = LaunchDescriptorResolver(
        argument_lookup, runner=runner, token_generator=token_generator
    )
    return resolver.resolve(request, override)


def _fetch_concurrently(
    plan: _LaunchPlan, request: RunRequest
) -> tuple[BaselineArguments, tuple[str, ...]]:
    lookups = plan.artifact_lookups(request.kind)
    if not lookups:
        return plan.fetch_baseline(request), ()
    with ThreadPoolExecutor(max_workers=1 + len(lookups)) as executor:
        baseline_future = executor.submit(plan.fetch_baseline, request)
        artifact_futures: list[Future[str]] = [executor.submit(lookup) for lookup in lookups]
        baseline = baseline_future.result()
        artifacts = tuple(future.result() for future in artifact_futures)
    return baseline, artifacts

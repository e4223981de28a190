"""Launch descriptor resolver tests."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest
from test_launch_resolver.argument_lookup.baseline_arguments import (
    ArgumentQuery,
    BaselineArguments,
    ResolutionError,
)
from test_launch_resolver.launch_overrides.override_models import OverrideConfig
from test_launch_resolver.launch_resolution.descriptor_resolver import (
    LAUNCH_NAME_PREFIX,
    LaunchDescriptorResolver,
    resolve_launch_descriptor,
)
from test_launch_resolver.naming.unique_tokens import UniqueTokenGenerator
from test_launch_resolver.run_requests.request_models import (
    ExecutionKind,
    ExecutionScope,
    RunRequest,
    SourcePosition,
    SourceRange,
)
from test_launch_resolver.runners.runner_contracts import ArtifactLookupError

RUNNER_ARCHIVE = "/runner/runner.jar"
RUNNER_LIBRARY = "/runner/lib"
RUNNER_ENTRY = "com.example.runner.Launcher"


def _baseline(**overrides) -> BaselineArguments:
    defaults: dict[str, Any] = {
        "project_name": "demo",
        "main_class": "org.junit.platform.console.ConsoleLauncher",
        "working_directory": "/work/demo",
        "classpath": ("Y", "Z"),
        "modulepath": ("B", "C"),
        "program_arguments": ("--select-method", "com.acme.FooTest#bar"),
        "vm_arguments": ("-ea",),
    }
    defaults.update(overrides)
    return BaselineArguments(**defaults)


def _request(**overrides) -> RunRequest:
    defaults: dict[str, Any] = {
        "full_name": "com.acme.FooTest#bar",
        "test_uri": "file:///work/demo/FooTest.java",
        "project_name": "demo",
        "kind": ExecutionKind.JUNIT5,
        "scope": ExecutionScope.METHOD,
        "location": SourceRange(SourcePosition(10, 4), SourcePosition(14, 5)),
        "is_debug": True,
        "is_hierarchical_package": False,
    }
    defaults.update(overrides)
    return RunRequest(**defaults)


class FakeArgumentLookup:
    def __init__(self, baseline: BaselineArguments | None = None, error: Exception | None = None):
        self.baseline = baseline or _baseline()
        self.error = error
        self.queries: list[ArgumentQuery] = []
        self.alternate_projects: list[str] = []

    def lookup_execution_arguments(self, query: ArgumentQuery) -> BaselineArguments:
        self.queries.append(query)
        if self.error:
            raise self.error
        return self.baseline

    def lookup_alternate_framework_arguments(self, project_name: str) -> BaselineArguments:
        self.alternate_projects.append(project_name)
        if self.error:
            raise self.error
        return self.baseline


class FakeRunner:
    entry_class_name = RUNNER_ENTRY

    def __init__(self, archive_error: Exception | None = None) -> None:
        self.archive_error = archive_error
        self.received_overrides: list[OverrideConfig | None] = []

    def archive_path(self, kind: ExecutionKind) -> str:
        if self.archive_error:
            raise self.archive_error
        return RUNNER_ARCHIVE

    def library_path(self, kind: ExecutionKind) -> str:
        return RUNNER_LIBRARY

    def application_args(self, override: OverrideConfig | None) -> list[str]:
        self.received_overrides.append(override)
        return ["0", "testng", "com.acme.FooTest"]


def _resolver(lookup: FakeArgumentLookup | None = None, runner: FakeRunner | None = None):
    return LaunchDescriptorResolver(
        lookup or FakeArgumentLookup(),
        runner=runner or FakeRunner(),
        token_generator=UniqueTokenGenerator(),
    )


def test_standard_kind_without_override_keeps_exact_baseline_classpath() -> None:
    descriptor = _resolver().resolve(_request(kind=ExecutionKind.JUNIT))

    assert descriptor.class_paths == ("Y", "Z")


def test_alternate_kind_classpath_ends_with_runner_archive_then_library() -> None:
    override = OverrideConfig.from_mapping({"classPaths": ["X"], "modulePaths": ["A"]})

    descriptor = _resolver().resolve(_request(kind=ExecutionKind.TESTNG), override)

    assert descriptor.class_paths == ("X", "Y", "Z", RUNNER_ARCHIVE, RUNNER_LIBRARY)


def test_alternate_kind_uses_runner_entry_class_and_application_args() -> None:
    lookup = FakeArgumentLookup()
    runner = FakeRunner()
    override = OverrideConfig.from_mapping({"args": ["-verbose"]})

    descriptor = _resolver(lookup, runner).resolve(
        _request(kind=ExecutionKind.TESTNG, scope=ExecutionScope.CLASS), override
    )

    assert descriptor.main_class == RUNNER_ENTRY
    assert descriptor.args == ("0", "testng", "com.acme.FooTest")
    assert runner.received_overrides == [override]
    assert lookup.alternate_projects == ["demo"]
    assert lookup.queries == []


def test_module_path_override_replaces_baseline() -> None:
    override = OverrideConfig.from_mapping({"modulePaths": ["A"]})

    descriptor = _resolver().resolve(_request(), override)

    assert descriptor.module_paths == ("A",)


def test_empty_module_path_override_still_replaces_baseline() -> None:
    override = OverrideConfig.from_mapping({"modulePaths": []})

    descriptor = _resolver().resolve(_request(), override)

    assert descriptor.module_paths == ()


def test_classpath_override_entries_come_before_baseline() -> None:
    override = OverrideConfig.from_mapping({"classPaths": ["X"]})

    descriptor = _resolver().resolve(_request(kind=ExecutionKind.JUNIT), override)

    assert descriptor.class_paths == ("X", "Y", "Z")


def test_vm_args_spelling_wins_over_lowercase_spelling_known_quirk() -> None:
    # Both spellings present: only vmArgs is read and vmargs is silently dropped.
    override = OverrideConfig.from_mapping({"vmArgs": ["-Da"], "vmargs": ["-Db"]})

    descriptor = _resolver().resolve(_request(), override)

    assert descriptor.vm_args == ("-ea", "-Da")


def test_lowercase_vm_args_spelling_used_when_camel_case_absent() -> None:
    override = OverrideConfig.from_mapping({"vmargs": ["-Db"]})

    descriptor = _resolver().resolve(_request(), override)

    assert descriptor.vm_args == ("-ea", "-Db")


def test_falsy_vm_args_entries_are_dropped() -> None:
    override = OverrideConfig.from_mapping({"vmArgs": ["-Da", "", None, "-Db"]})

    descriptor = _resolver().resolve(_request(), override)

    assert descriptor.vm_args == ("-ea", "-Da", "-Db")


def test_resolution_does_not_mutate_baseline_vm_arguments() -> None:
    lookup = FakeArgumentLookup()
    override = OverrideConfig.from_mapping({"vmArgs": ["-Da"]})

    _resolver(lookup).resolve(_request(), override)
    second = _resolver(lookup).resolve(_request(), override)

    assert lookup.baseline.vm_arguments == ("-ea",)
    assert second.vm_args == ("-ea", "-Da")


def test_working_directory_spelling_wins_over_cwd() -> None:
    override = OverrideConfig.from_mapping({"workingDirectory": "/a", "cwd": "/b"})

    descriptor = _resolver().resolve(_request(), override)

    assert descriptor.cwd == "/a"


def test_cwd_used_when_working_directory_absent_or_empty() -> None:
    override = OverrideConfig.from_mapping({"workingDirectory": "", "cwd": "/b"})

    descriptor = _resolver().resolve(_request(), override)

    assert descriptor.cwd == "/b"


def test_baseline_working_directory_used_without_override() -> None:
    descriptor = _resolver().resolve(_request())

    assert descriptor.cwd == "/work/demo"


def test_pass_through_keys_are_copied_and_reserved_keys_ignored() -> None:
    override = OverrideConfig.from_mapping(
        {
            "env": {"FOO": "1"},
            "name": "my launch",
            "mainClass": "com.example.Other",
            "projectName": "other",
            "type": "python",
        }
    )

    descriptor = _resolver().resolve(_request(), override)
    mapping = descriptor.to_mapping()

    assert mapping["env"] == {"FOO": "1"}
    assert mapping["name"].startswith(LAUNCH_NAME_PREFIX)
    assert mapping["mainClass"] == "org.junit.platform.console.ConsoleLauncher"
    assert mapping["projectName"] == "demo"
    assert mapping["type"] == "java"


def test_no_debug_negates_request_debug_flag() -> None:
    resolver = _resolver()

    assert resolver.resolve(_request(is_debug=True)).no_debug is False
    assert resolver.resolve(_request(is_debug=False)).no_debug is True


def test_no_debug_is_not_overridable_by_pass_through_key() -> None:
    override = OverrideConfig.from_mapping({"noDebug": True})

    mapping = _resolver().resolve(_request(is_debug=True), override).to_mapping()

    assert mapping["noDebug"] is False


def test_method_scope_junit5_request_end_to_end() -> None:
    lookup = FakeArgumentLookup()

    descriptor = _resolver(lookup).resolve(_request())

    assert descriptor.main_class == "org.junit.platform.console.ConsoleLauncher"
    assert descriptor.args == ("--select-method", "com.acme.FooTest#bar")
    assert descriptor.no_debug is False
    assert descriptor.module_paths == ("B", "C")
    assert descriptor.project_name == "demo"
    query = lookup.queries[0]
    assert query.class_name == "com.acme.FooTest"
    assert query.method_name == "bar"
    assert query.start == SourcePosition(10, 4)
    assert query.end == SourcePosition(14, 5)
    assert query.scope is ExecutionScope.METHOD
    assert query.kind is ExecutionKind.JUNIT5


def test_source_range_omitted_for_kinds_without_range_filtering() -> None:
    lookup = FakeArgumentLookup()

    _resolver(lookup).resolve(_request(kind=ExecutionKind.JUNIT))

    assert lookup.queries[0].start is None
    assert lookup.queries[0].end is None


def test_source_range_omitted_for_class_scope() -> None:
    lookup = FakeArgumentLookup()

    _resolver(lookup).resolve(_request(full_name="com.acme.FooTest", scope=ExecutionScope.CLASS))

    query = lookup.queries[0]
    assert query.method_name == ""
    assert query.start is None
    assert query.end is None


def test_resolution_error_propagates_unchanged() -> None:
    error = ResolutionError("Project not resolvable: demo")
    lookup = FakeArgumentLookup(error=error)

    with pytest.raises(ResolutionError) as exc_info:
        _resolver(lookup).resolve(_request())

    assert exc_info.value is error


def test_alternate_kind_resolution_error_propagates_unchanged() -> None:
    error = ResolutionError("ambiguous target")
    lookup = FakeArgumentLookup(error=error)

    with pytest.raises(ResolutionError) as exc_info:
        _resolver(lookup).resolve(_request(kind=ExecutionKind.TESTNG))

    assert exc_info.value is error


def test_artifact_lookup_error_propagates_unchanged() -> None:
    error = ArtifactLookupError("Runner archive not found")

    with pytest.raises(ArtifactLookupError) as exc_info:
        _resolver(runner=FakeRunner(archive_error=error)).resolve(
            _request(kind=ExecutionKind.TESTNG)
        )

    assert exc_info.value is error


def test_alternate_kind_without_runner_is_rejected() -> None:
    resolver = LaunchDescriptorResolver(FakeArgumentLookup())

    with pytest.raises(ValueError):
        resolver.resolve(_request(kind=ExecutionKind.TESTNG))


def test_concurrent_resolutions_produce_distinct_names() -> None:
    resolver = _resolver()

    def _resolve_once(_: int) -> str:
        return resolver.resolve(_request()).name

    with ThreadPoolExecutor(max_workers=8) as executor:
        names = list(executor.map(_resolve_once, range(64)))

    assert len(set(names)) == 64
    assert all(name.startswith(LAUNCH_NAME_PREFIX) for name in names)


def test_resolve_launch_descriptor_uses_supplied_token_generator() -> None:
    descriptor = resolve_launch_descriptor(
        _request(),
        argument_lookup=FakeArgumentLookup(),
        token_generator=lambda: "42",
    )

    assert descriptor.name == "Launch Java Tests - 42"

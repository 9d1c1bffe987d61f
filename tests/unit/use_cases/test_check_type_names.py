"""Unit tests for CheckTypeNamesUseCase."""

import unittest
from unittest.mock import MagicMock

from type_name_linter.domain.config import TypeNameConfiguration
from type_name_linter.domain.entities import (
    DEFAULT_SWIFT_VERSION,
    DeclarationKind,
    DeclarationSite,
    Severity,
    SourceFile,
    SwiftVersion,
)
from type_name_linter.domain.errors import SourceKitError
from type_name_linter.domain.rules.type_name import TypeNameRule
from type_name_linter.use_cases.check_type_names import CheckTypeNamesUseCase


def _source_file(path: str, version: SwiftVersion, *names: str) -> SourceFile:
    children = tuple(
        DeclarationSite(kind=DeclarationKind.CLASS, name=name, name_offset=index * 10)
        for index, name in enumerate(names)
    )
    return SourceFile(path=path, contents="", structure=DeclarationSite(substructure=children), swift_version=version)


class TestCheckTypeNamesUseCase(unittest.TestCase):
    def setUp(self) -> None:
        self.filesystem = MagicMock()
        self.gateway = MagicMock()
        self.telemetry = MagicMock()
        self.gateway.load.side_effect = lambda path, version: {
            "Sources/A.swift": _source_file("Sources/A.swift", version, "Good", "bad"),
            "Sources/B.swift": _source_file("Sources/B.swift", version, "Ab"),
        }[path]
        self.filesystem.find_swift_files.return_value = ["Sources/A.swift", "Sources/B.swift"]

    def _use_case(self, configuration: TypeNameConfiguration | None = None) -> CheckTypeNamesUseCase:
        return CheckTypeNamesUseCase(
            rule=TypeNameRule(configuration),
            filesystem=self.filesystem,
            sourcekit_gateway=self.gateway,
            telemetry=self.telemetry,
        )

    def test_collects_violations_with_paths(self) -> None:
        result = self._use_case().execute("Sources")
        self.assertEqual([v.location for v in result.violations], ["Sources/A.swift:10", "Sources/B.swift:0"])
        self.assertEqual(result.files_checked, ["Sources/A.swift", "Sources/B.swift"])
        self.assertTrue(result.has_errors())
        self.assertEqual(result.count(Severity.ERROR), 1)
        self.assertEqual(result.count(Severity.WARNING), 1)
        self.telemetry.step.assert_called_once()

    def test_passes_exclude_paths_to_discovery(self) -> None:
        self._use_case(TypeNameConfiguration(exclude_paths=("Pods/",))).execute("Sources")
        self.filesystem.find_swift_files.assert_called_once_with("Sources", ("Pods/",))

    def test_swift_version_resolution(self) -> None:
        self._use_case().execute("Sources")
        self.assertEqual(self.gateway.load.call_args.args[1], DEFAULT_SWIFT_VERSION)

        self.gateway.load.reset_mock()
        self._use_case(TypeNameConfiguration(swift_version=SwiftVersion(4, 0))).execute("Sources")
        self.assertEqual(self.gateway.load.call_args.args[1], SwiftVersion(4, 0))

        self.gateway.load.reset_mock()
        configured = self._use_case(TypeNameConfiguration(swift_version=SwiftVersion(4, 0)))
        configured.execute("Sources", SwiftVersion(5, 5))
        self.assertEqual(self.gateway.load.call_args.args[1], SwiftVersion(5, 5))

    def test_failed_file_does_not_stop_the_run(self) -> None:
        def load(path: str, version: SwiftVersion) -> SourceFile:
            if path == "Sources/A.swift":
                raise SourceKitError("sourcekitten exited with 1")
            return _source_file(path, version, "fine")

        self.gateway.load.side_effect = load
        result = self._use_case().execute("Sources")
        self.assertEqual(result.files_failed, {"Sources/A.swift": "sourcekitten exited with 1"})
        self.assertEqual(result.files_checked, ["Sources/B.swift"])
        self.assertEqual(len(result.violations), 1)
        self.telemetry.warning.assert_called_once()

    def test_no_files_is_clean(self) -> None:
        self.filesystem.find_swift_files.return_value = []
        result = self._use_case().execute("Empty")
        self.assertFalse(result.has_violations())
        self.assertFalse(result.has_errors())

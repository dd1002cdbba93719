"""Packaging correctness verification for json-node-patch.

Tests validate:
- Base install imports cleanly and exposes the public API
- py.typed marker is present in the source package
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the current installation rather than building wheels or
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the installed package imports and works out of the box."""

    def test_import_json_node_patch(self) -> None:
        """Top-level import succeeds."""
        import json_node_patch

        assert hasattr(json_node_patch, "patch")
        assert hasattr(json_node_patch, "canonicalize")
        assert hasattr(json_node_patch, "format_path")
        assert hasattr(json_node_patch, "EditSession")

    def test_patch_basic(self) -> None:
        from json_node_patch import patch

        assert patch({"a": 1}, ["a"], 2) == {"a": 2}

    def test_format_path_basic(self) -> None:
        from json_node_patch import format_path

        assert format_path(["a", 0]) == '$["a"][0]'

    def test_py_typed_marker_present(self) -> None:
        """py.typed marker must ship with the package."""
        import json_node_patch

        package_dir = Path(json_node_patch.__file__).parent
        assert (package_dir / "py.typed").exists()


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self) -> None:
        """pytest11 entry point must be registered for json-node-patch."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        ours = [ep for ep in pytest11_eps if "json_node_patch" in str(ep.value)]
        assert ours, (
            f"No pytest11 entry point found for json-node-patch. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self) -> None:
        """assert_patch_isolated fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("json_node_patch.integrations._pytest_plugin")
        assert hasattr(mod, "assert_patch_isolated")
        assert callable(mod.assert_patch_isolated)

    def test_plugin_discovery_via_pytest(self) -> None:
        """pytest --fixtures should list assert_patch_isolated."""
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "--fixtures", "-q"],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert "assert_patch_isolated" in result.stdout, (
            f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
        )


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self) -> None:
        """Package version must be 0.1.0."""
        import json_node_patch

        assert json_node_patch.__version__ == "0.1.0"

    def test_distribution_metadata(self) -> None:
        from importlib.metadata import version

        assert version("json-node-patch") == "0.1.0"

    def test_all_exports(self) -> None:
        """__all__ must include the documented public API."""
        import json_node_patch

        expected = {
            "CommitError",
            "CommitResult",
            "DraftInvalid",
            "EditSession",
            "EditorConfig",
            "FileDocumentStore",
            "HostDocumentCorrupt",
            "InMemoryDocumentStore",
            "NodeData",
            "NodeEditError",
            "PathStale",
            "RenderState",
            "Row",
            "RowType",
            "SessionMode",
            "SessionStateError",
            "StaleReason",
            "apply_edit",
            "canonicalize",
            "format_path",
            "patch",
            "resolve_path",
        }
        actual = set(json_node_patch.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )

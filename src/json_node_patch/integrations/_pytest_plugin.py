"""pytest plugin for json-node-patch.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from json_node_patch import format_path, patch, resolve_path


def _diff_outside(
    before: Any, after: Any, path: tuple[Any, ...], here: tuple[Any, ...]
) -> list[str]:
    """Return formatted paths where ``after`` differs from ``before`` off ``path``."""
    if here == path:
        return []
    on_path = here == path[: len(here)]
    if not on_path:
        if before == after and type(before) is type(after):
            return []
        return [format_path(here)]
    if isinstance(before, dict) and isinstance(after, dict):
        # A key may only appear or vanish where it is the patched segment.
        changed = [
            format_path(here + (k,))
            for k in before.keys() ^ after.keys()
            if here + (k,) != path
        ]
        for key in before.keys() & after.keys():
            changed.extend(_diff_outside(before[key], after[key], path, here + (key,)))
        return changed
    if isinstance(before, list) and isinstance(after, list) and len(before) == len(after):
        changed = []
        for idx, (b, a) in enumerate(zip(before, after, strict=True)):
            changed.extend(_diff_outside(b, a, path, here + (idx,)))
        return changed
    return [format_path(here)]


@pytest.fixture(scope="session")
def assert_patch_isolated() -> Any:
    """Fixture that returns a callable patch-locality asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_rename(assert_patch_isolated):
            doc = {"user": {"name": "Ann"}, "n": 1}
            assert_patch_isolated(doc, ["user", "name"], "Bob")

    Returns:
        A callable ``_assert(root, path, new_value, patch_fn=None) -> Any`` that
        applies the patch (``json_node_patch.patch`` unless ``patch_fn`` is
        given), checks it, and returns the patched document.
    """

    def _assert(root: Any, path: Any, new_value: Any, patch_fn: Any = None) -> Any:
        """Assert that patching ``root`` at ``path`` changed nothing else.

        Checks that:
        - resolving ``path`` in the result yields ``new_value``;
        - every value outside the subtree at ``path`` is unchanged;
        - the input ``root`` was not mutated.

        Raises:
            AssertionError: Listing the formatted paths that violate isolation.
        """
        apply = patch_fn if patch_fn is not None else patch
        segments = tuple(path or ())
        snapshot = copy.deepcopy(root)
        result = apply(root, segments, new_value)

        if root != snapshot:
            raise AssertionError(
                f"patch mutated its input at {format_path(segments)}\n"
                f"  before: {snapshot}\n"
                f"  after:  {root}"
            )
        actual = resolve_path(result, segments)
        if actual != new_value:
            raise AssertionError(
                f"value at {format_path(segments)} is {actual!r}, expected {new_value!r}"
            )
        if segments:
            changed = _diff_outside(snapshot, result, segments, ())
            if changed:
                raise AssertionError(
                    f"patch at {format_path(segments)} changed values outside its subtree: "
                    f"{sorted(changed)}"
                )
        return result

    return _assert

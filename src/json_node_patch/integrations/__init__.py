"""Integrations subpackage for json-node-patch.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_patch_isolated`` fixture
"""

from __future__ import annotations

__all__: list[str] = []

"""Tree subpackage for the node data model.

Re-exports the public API for the tree module:
- Row: one flattened key/value/type entry of a node
- RowType: StrEnum of the six JSON row types
- NodeData: rows plus the path addressing the node
- JsonValue, Path, PathSegment: type aliases
"""

from json_node_patch.tree.nodes import (
    JsonValue,
    NodeData,
    Path,
    PathSegment,
    Row,
    RowType,
    as_path,
    as_rows,
)

__all__ = [
    "JsonValue",
    "NodeData",
    "Path",
    "PathSegment",
    "Row",
    "RowType",
    "as_path",
    "as_rows",
]

"""
jdiff
=====

Structural comparison of two JSON documents.

    delta = compare({"x": 1, "y": [1, 2]}, {"x": 1, "y": [1, 3], "z": 0})

    build_views(delta)
        eq      → {"x": 1, "y": [1]}
        diff_ab → {"y": [[2, 3]]}
        diff_ba → {"y": [[3, 2]], "z": 0}

compare() produces a Delta tree that records, position by position,
whether the documents agree (Equal), disagree (DifferentContent,
DifferentVariant) or only one of them has the node (MissingInSecond,
MissingInFirst).  project() folds a Delta back into a plain document
under a caller-supplied filter; the three standard views above are
three such filters.
"""

__version__ = "0.2.0"

from jdiff.core import (
    # Types
    Delta,
    DeltaKind,
    Equal,
    DifferentContent,
    DifferentVariant,
    MissingInSecond,
    MissingInFirst,
    ListDelta,
    MapDelta,
    NodeKind,
    node_kind,
    # Differencing / projection
    compare,
    project,
    ABSENT,
    # Inspection
    walk,
    summarize,
    format_delta,
)
from jdiff.views import (
    Views, build_views, equal_filter, diff_filter_ab, diff_filter_ba, VIEW_FILTERS,
)
from jdiff.formats import (
    JdiffError, DocumentReadError, DocumentParseError, OutputWriteError,
    read_document, parse_document, dump_document, write_document, output_paths,
)

__all__ = [
    "Delta", "DeltaKind", "Equal", "DifferentContent", "DifferentVariant",
    "MissingInSecond", "MissingInFirst", "ListDelta", "MapDelta",
    "NodeKind", "node_kind",
    "compare", "project", "ABSENT",
    "walk", "summarize", "format_delta",
    "Views", "build_views", "equal_filter", "diff_filter_ab", "diff_filter_ba",
    "VIEW_FILTERS",
    "JdiffError", "DocumentReadError", "DocumentParseError", "OutputWriteError",
    "read_document", "parse_document", "dump_document", "write_document", "output_paths",
]

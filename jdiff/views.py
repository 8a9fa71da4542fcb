"""
jdiff.views — The three standard projections of a Delta.

Given compare(first, second), derive three plain documents:

    eq       what both documents agree on
    diff_ab  disagreements from the first document's side:
               DifferentContent / DifferentVariant → [v1, v2]
               MissingInSecond(v1)                 → v1
    diff_ba  the mirror image from the second document's side:
               DifferentContent / DifferentVariant → [v2, v1]
               MissingInFirst(v2)                  → v2

Each view is one filter handed to core.project; everything a filter
declines falls back to the projector's default (containers recurse,
leaves are dropped).
"""

from dataclasses import dataclass
from typing import Any

from .core import ABSENT, PAIR_KINDS, Delta, DeltaKind, project


# ═══════════════════════════════════════════════════════════════════
#  FILTERS
# ═══════════════════════════════════════════════════════════════════

def equal_filter(delta: Delta) -> Any:
    """Keep Equal nodes verbatim."""
    if delta.kind is DeltaKind.EQUAL:
        return delta.node
    return ABSENT


def diff_filter_ab(delta: Delta) -> Any:
    """Differences relative to the second document: [first, second] pairs."""
    if delta.kind in PAIR_KINDS:
        return [delta.first, delta.second]
    if delta.kind is DeltaKind.MISSING_IN_SECOND:
        return delta.node
    return ABSENT


def diff_filter_ba(delta: Delta) -> Any:
    """Differences relative to the first document: [second, first] pairs."""
    if delta.kind in PAIR_KINDS:
        return [delta.second, delta.first]
    if delta.kind is DeltaKind.MISSING_IN_FIRST:
        return delta.node
    return ABSENT


# Output suffix → filter, in the order the files are written.
VIEW_FILTERS = {
    "eq": equal_filter,
    "diff_ab": diff_filter_ab,
    "diff_ba": diff_filter_ba,
}


# ═══════════════════════════════════════════════════════════════════
#  RESULT
# ═══════════════════════════════════════════════════════════════════

@dataclass
class Views:
    """The three projections of one Delta.  ABSENT where nothing survived."""
    equal: Any
    diff_ab: Any
    diff_ba: Any

    @property
    def is_identical(self) -> bool:
        return self.diff_ab is ABSENT and self.diff_ba is ABSENT

    def by_suffix(self) -> dict[str, Any]:
        return {"eq": self.equal, "diff_ab": self.diff_ab, "diff_ba": self.diff_ba}

    def __repr__(self) -> str:
        if self.is_identical:
            return "Views(identical)"
        return f"Views(eq={self.equal!r}, diff_ab={self.diff_ab!r}, diff_ba={self.diff_ba!r})"


def build_views(delta: Delta) -> Views:
    """Run the three standard filters over one Delta."""
    return Views(
        equal=project(delta, equal_filter),
        diff_ab=project(delta, diff_filter_ab),
        diff_ba=project(delta, diff_filter_ba),
    )

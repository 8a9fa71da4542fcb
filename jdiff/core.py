"""
jdiff.core — Structural Delta between two JSON documents
========================================================

THE MODEL
═════════

§1  DOCUMENTS
─────────────

A document is whatever the stdlib `json` module hands back:

    JSON null     → None
    JSON boolean  → bool
    JSON number   → int / float
    JSON string   → str
    JSON array    → list
    JSON object   → dict[str, ...]

Nothing is wrapped or converted.  A Delta points straight into these
objects, so a Delta is only meaningful while both documents are alive
and unmodified.


§2  THE DELTA
─────────────

compare(a, b) returns exactly one Delta per position:

    Equal(v)                  both sides hold the same node
    DifferentContent(v1, v2)  same variant, different value
    DifferentVariant(v1, v2)  different variants (number vs map, ...)
    MissingInSecond(v1)       only document 1 has this position
    MissingInFirst(v2)        only document 2 has this position
    ListDelta(items)          two arrays, compared by index
    MapDelta(entries)         two objects, compared by key union

Arrays are POSITIONAL: element i is compared with element i, the tail
of the longer array becomes MissingInSecond / MissingInFirst.  No
reordering, no similarity matching.

Objects use the key UNION: shared keys recurse, one-sided keys become
MissingInSecond / MissingInFirst.

A container whose children all came out Equal collapses to Equal of
the first document's container, so Equal always means deep equality.


§3  THE PROJECTOR
─────────────────

project(delta, filt) folds a Delta back into a plain document.  The
filter sees every Delta node first:

    filt(d) is a node   → use it verbatim, stop descending
    filt(d) is ABSENT   → ListDelta / MapDelta: recurse, drop ABSENT
                          children, empty result is ABSENT
                          anything else: ABSENT

ABSENT is not None: None is a perfectly good JSON null.

The three output views (equal / diff_ab / diff_ba) are just three
filters over one Delta (see jdiff.views).
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Iterator, Union


# ═══════════════════════════════════════════════════════════════════
#  NODE KINDS
# ═══════════════════════════════════════════════════════════════════

class NodeKind(Enum):
    """The six JSON variants."""
    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    LIST = auto()
    MAP = auto()


def node_kind(node: Any) -> NodeKind:
    """
    Classify a document node by its JSON variant.

    bool is checked before numbers: in Python True == 1, but in JSON
    a boolean and a number are different variants.
    """
    if node is None:
        return NodeKind.NULL
    if isinstance(node, bool):
        return NodeKind.BOOL
    if isinstance(node, (int, float)):
        return NodeKind.NUMBER
    if isinstance(node, str):
        return NodeKind.STRING
    if isinstance(node, list):
        return NodeKind.LIST
    if isinstance(node, dict):
        return NodeKind.MAP
    raise TypeError(f"Not a JSON document node: {type(node).__name__}")


def _scalars_equal(a: Any, b: Any) -> bool:
    # 1 and 1.0 are distinct JSON numbers
    return type(a) is type(b) and a == b


# ═══════════════════════════════════════════════════════════════════
#  DELTA TYPES
# ═══════════════════════════════════════════════════════════════════

class DeltaKind(Enum):
    """Tags of the Delta union."""
    EQUAL = auto()
    DIFFERENT_CONTENT = auto()
    DIFFERENT_VARIANT = auto()
    MISSING_IN_SECOND = auto()
    MISSING_IN_FIRST = auto()
    LIST = auto()
    MAP = auto()


class Delta:
    """Base class for Delta nodes.  Not instantiated directly."""
    __slots__ = ()

    kind: DeltaKind


@dataclass(frozen=True, slots=True)
class Equal(Delta):
    """Both documents hold the same node at this position."""
    node: Any

    kind = DeltaKind.EQUAL

    def __repr__(self) -> str:
        return f"Equal({self.node!r})"


@dataclass(frozen=True, slots=True)
class DifferentContent(Delta):
    """Same variant on both sides, different value."""
    first: Any
    second: Any

    kind = DeltaKind.DIFFERENT_CONTENT

    def __repr__(self) -> str:
        return f"DifferentContent({self.first!r}, {self.second!r})"


@dataclass(frozen=True, slots=True)
class DifferentVariant(Delta):
    """
    The two sides are different JSON variants.

    Examples:
        DifferentVariant(1, [1])
        DifferentVariant(True, 1)
        DifferentVariant("x", None)
    """
    first: Any
    second: Any

    kind = DeltaKind.DIFFERENT_VARIANT

    def __repr__(self) -> str:
        return f"DifferentVariant({self.first!r}, {self.second!r})"


@dataclass(frozen=True, slots=True)
class MissingInSecond(Delta):
    """Only the first document has this position."""
    node: Any

    kind = DeltaKind.MISSING_IN_SECOND

    def __repr__(self) -> str:
        return f"MissingInSecond({self.node!r})"


@dataclass(frozen=True, slots=True)
class MissingInFirst(Delta):
    """Only the second document has this position."""
    node: Any

    kind = DeltaKind.MISSING_IN_FIRST

    def __repr__(self) -> str:
        return f"MissingInFirst({self.node!r})"


@dataclass(frozen=True, slots=True)
class ListDelta(Delta):
    """
    Two arrays compared index by index.

    items[i] for i < min(len1, len2) is the recursive Delta of the two
    elements; the rest are MissingInSecond / MissingInFirst.
    """
    items: tuple[Delta, ...]

    kind = DeltaKind.LIST

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        if len(self.items) <= 5:
            return f"ListDelta({list(self.items)})"
        return f"ListDelta([{self.items[0]!r}, ..., {self.items[-1]!r}] len={len(self.items)})"


@dataclass(frozen=True, slots=True)
class MapDelta(Delta):
    """
    Two objects compared over the union of their keys.

    The key set of `entries` is exactly keys(first) ∪ keys(second).
    """
    entries: dict[str, Delta]

    kind = DeltaKind.MAP

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        if len(self.entries) <= 3:
            return f"MapDelta({self.entries})"
        return f"MapDelta({{...}} len={len(self.entries)})"


PAIR_KINDS = (DeltaKind.DIFFERENT_CONTENT, DeltaKind.DIFFERENT_VARIANT)
CONTAINER_KINDS = (DeltaKind.LIST, DeltaKind.MAP)


# ═══════════════════════════════════════════════════════════════════
#  DIFFERENCER
# ═══════════════════════════════════════════════════════════════════

def compare(a: Any, b: Any) -> Delta:
    """
    Structural Delta between two document nodes.

    Total over JSON values: a structural mismatch is a result
    (DifferentVariant), not an error.  Runs in time linear in the
    combined node count.
    """
    ka = node_kind(a)
    kb = node_kind(b)

    if ka is not kb:
        return DifferentVariant(a, b)

    if ka is NodeKind.NULL:
        return Equal(a)

    if ka is NodeKind.LIST:
        return _compare_lists(a, b)

    if ka is NodeKind.MAP:
        return _compare_maps(a, b)

    if _scalars_equal(a, b):
        return Equal(a)
    return DifferentContent(a, b)


def _compare_lists(a: list, b: list) -> Delta:
    """Positional comparison: index i against index i, then the tail."""
    items: list[Delta] = [compare(x, y) for x, y in zip(a, b)]

    if len(a) > len(b):
        items.extend(MissingInSecond(x) for x in a[len(b):])
    else:
        items.extend(MissingInFirst(y) for y in b[len(a):])

    if all(d.kind is DeltaKind.EQUAL for d in items):
        return Equal(a)
    return ListDelta(tuple(items))


def _compare_maps(a: dict, b: dict) -> Delta:
    """Key-union comparison: first map's keys, then keys only in the second."""
    entries: dict[str, Delta] = {}

    for key, va in a.items():
        if key in b:
            entries[key] = compare(va, b[key])
        else:
            entries[key] = MissingInSecond(va)

    for key, vb in b.items():
        if key not in a:
            entries[key] = MissingInFirst(vb)

    if all(d.kind is DeltaKind.EQUAL for d in entries.values()):
        return Equal(a)
    return MapDelta(entries)


# ═══════════════════════════════════════════════════════════════════
#  PROJECTOR
# ═══════════════════════════════════════════════════════════════════

class _Absent:
    """Marker for "no node here".  Falsy, singleton."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()

Filter = Callable[[Delta], Any]


def project(delta: Delta, filt: Filter) -> Any:
    """
    Fold a Delta into a plain document using `filt` as the policy.

    `filt(delta)` returning anything other than ABSENT wins outright.
    Otherwise containers are projected child by child (ABSENT children
    dropped, empty containers become ABSENT) and every other Delta
    kind projects to ABSENT.
    """
    out = filt(delta)
    if out is not ABSENT:
        return out

    if isinstance(delta, ListDelta):
        items = []
        for child in delta.items:
            value = project(child, filt)
            if value is not ABSENT:
                items.append(value)
        return items if items else ABSENT

    if isinstance(delta, MapDelta):
        entries = {}
        for key, child in delta.entries.items():
            value = project(child, filt)
            if value is not ABSENT:
                entries[key] = value
        return entries if entries else ABSENT

    return ABSENT


# ═══════════════════════════════════════════════════════════════════
#  INSPECTION
# ═══════════════════════════════════════════════════════════════════

DeltaPath = tuple[Union[int, str], ...]


def walk(delta: Delta, path: DeltaPath = ()) -> Iterator[tuple[DeltaPath, Delta]]:
    """Yield (path, delta) for every non-container Delta, depth first."""
    if isinstance(delta, ListDelta):
        for i, child in enumerate(delta.items):
            yield from walk(child, path + (i,))
    elif isinstance(delta, MapDelta):
        for key, child in delta.entries.items():
            yield from walk(child, path + (key,))
    else:
        yield path, delta


def summarize(delta: Delta) -> dict[DeltaKind, int]:
    """Count leaf Deltas per kind.  Every leaf kind is present, possibly 0."""
    counts = {kind: 0 for kind in DeltaKind if kind not in CONTAINER_KINDS}
    for _, leaf in walk(delta):
        counts[leaf.kind] += 1
    return counts


def format_delta(delta: Delta) -> str:
    """
    One line per leaf Delta, e.g.

        EQUAL at name: 'Alice'
        DIFFERENT_CONTENT at address/city: 'Paris' → 'Rome'
        MISSING_IN_FIRST at tags/2: 'new'
    """
    lines = []
    for path, leaf in walk(delta):
        path_str = "/".join(str(p) for p in path) or "(root)"
        if leaf.kind in PAIR_KINDS:
            detail = f"{leaf.first!r} → {leaf.second!r}"
        else:
            detail = repr(leaf.node)
        lines.append(f"{leaf.kind.name} at {path_str}: {detail}")
    return "\n".join(lines)

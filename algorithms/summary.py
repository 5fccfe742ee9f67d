"""
summary.py — Terminal-step summary helpers
===========================================
Every engine ends with a step whose stats list what made it into the
result and what didn't.  These helpers keep that wording identical
across engines.

Chosen edges are tracked as Edge OBJECTS, not endpoint pairs, so a
directed edge walked "backwards" by Prim, or one of two parallel edges,
is never mistaken for its neighbour.
"""

from typing import Iterable, List, Sequence

from graph import Edge, GraphData
from algorithms.step import EdgePair, NONE_LABEL, join_ids


def format_pairs(pairs: Iterable[EdgePair], empty: str = NONE_LABEL) -> str:
    text = ", ".join(f"{s} → {t}" for s, t in pairs)
    return text or empty


def format_edges(edges: Iterable[Edge], empty: str = NONE_LABEL) -> str:
    return format_pairs((e.pair() for e in edges), empty=empty)


def format_tuples(pairs: Iterable[EdgePair], sep: str = " → ") -> str:
    """(1, 2) → (2, 3) style, used for processing order."""
    return sep.join(f"({s}, {t})" for s, t in pairs)


def excluded_edges(graph: GraphData, chosen: Iterable[Edge]) -> List[Edge]:
    chosen_ids = {id(e) for e in chosen}
    return [e for e in graph.edges if id(e) not in chosen_ids]


def excluded_nodes(graph: GraphData, chosen: Iterable[int]) -> List[int]:
    keep = set(chosen)
    return [nid for nid in graph.node_ids() if nid not in keep]


def format_nodes(ids: Sequence[int]) -> str:
    return join_ids(ids)


def format_order(ids: Sequence[int]) -> str:
    return join_ids(ids, sep=" → ", empty="")

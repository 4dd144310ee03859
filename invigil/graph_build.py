import logging
from typing import Sequence

import networkx as nx

from .models import Exam

logger = logging.getLogger(__name__)


def build_conflict_graph(exams: Sequence[Exam]) -> nx.Graph:
    """Connect every pair of exams that share a time slot.

    Each exam's ``conflicts`` set is rebuilt from scratch so it mirrors the
    returned graph's adjacency. Exams without conflicts are still nodes.
    """
    G = nx.Graph()
    for ex in exams:
        ex.conflicts = set()
        G.add_node(ex.id)
    for i in range(len(exams)):
        for j in range(i + 1, len(exams)):
            u, v = exams[i], exams[j]
            if u.is_conflict(v):
                u.conflicts.add(v.id)
                v.conflicts.add(u.id)
                G.add_edge(u.id, v.id)
    logger.debug("conflict graph: %d exams, %d edges", G.number_of_nodes(), G.number_of_edges())
    return G

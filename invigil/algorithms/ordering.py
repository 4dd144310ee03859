from typing import List, Optional, Sequence
import random
import networkx as nx

from ..models import Exam

ORDERS = ('given', 'degree', 'random')


def order_exams(G: nx.Graph, exams: Sequence[Exam], order: str = 'given',
                seed: Optional[int] = None) -> List[Exam]:
    """Return the exams in the order the solver should visit them.

    'degree' puts the most constrained exams first (ties keep list order),
    which usually detects infeasibility sooner.
    """
    if order == 'given':
        return list(exams)
    if order == 'degree':
        return sorted(exams, key=lambda ex: G.degree(ex.id), reverse=True)
    if order == 'random':
        shuffled = list(exams)
        random.Random(seed).shuffle(shuffled)
        return shuffled
    raise ValueError("order must be 'given', 'degree' or 'random'")

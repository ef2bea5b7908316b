"""
Behind the curtain: the piecewise approximation of E1 and its router.

Main functions:
- E1: routed evaluation with domain errors
- classify: which interval of the partition an argument falls in
- le_neg_10, le_neg_4, le_neg_1, le_pos_1, le_pos_4, le_pos_xmax:
  the per-interval approximations
"""

from .piecewise import (le_neg_10, le_neg_4, le_neg_1, le_pos_1, le_pos_4,
                        le_pos_xmax, BRANCHES)
from .router import E1, Interval, classify

__all__ = [
    'E1',
    'Interval',
    'classify',
    'le_neg_10',
    'le_neg_4',
    'le_neg_1',
    'le_pos_1',
    'le_pos_4',
    'le_pos_xmax',
    'BRANCHES',
]

"""
Exhaustive search for small large-gap Gray codes

Theorem 1 needs good base codes to start from. For small widths the
space of Gray cycles is small enough to search directly: a depth-first
walk on the hypercube that refuses any bit flipped fewer than
`min_gap` steps ago, including across the wrap-around.
"""

import numpy as np
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class _BudgetExhausted(Exception):
    pass


def min_gap_upper_bound(width: int) -> int:
    """
    Largest minimum gap a width-bit Gray code could possibly have

    Every bit flips an even number of times and the flip counts sum to
    2^width, so some bit flips at least c times, c being the smallest
    even number >= 2^width / width. That bit has a gap <= 2^width / c.
    """
    length = 1 << width
    c = -(-length // width)
    if c % 2:
        c += 1
    return length // c


def find_transitions(width: int, min_gap: int,
                     max_nodes: Optional[int] = None) -> Optional[List[int]]:
    """
    Depth-first search for a cyclic Gray code with every gap >= min_gap

    Args:
        width: Code width
        min_gap: Required minimum cyclic distance between flips of a bit
        max_nodes: Give up after visiting this many search nodes (None for no limit)

    Returns:
        Transition sequence starting at word 0, or None if no code exists
        or the node budget ran out first
    """
    length = 1 << width
    visited = np.zeros(length, dtype=bool)
    visited[0] = True
    last_used = [None] * width
    first_used = [None] * width
    sequence = []
    nodes = [0]

    def allowed(bit: int, step: int) -> bool:
        if last_used[bit] is not None and step - last_used[bit] < min_gap:
            return False
        # Gap that wraps from this flip to the bit's first flip
        if first_used[bit] is not None and first_used[bit] + length - step < min_gap:
            return False
        return True

    def extend(word: int, step: int) -> bool:
        nodes[0] += 1
        if max_nodes is not None and nodes[0] > max_nodes:
            raise _BudgetExhausted
        if step == length - 1:
            # The closing flip must lead back to word 0
            if word & (word - 1):
                return False
            bit = word.bit_length() - 1
            if not allowed(bit, step):
                return False
            sequence.append(bit)
            return True

        for bit in range(width):
            nxt = word ^ (1 << bit)
            if visited[nxt] or not allowed(bit, step):
                continue
            previous = last_used[bit]
            first = first_used[bit]
            visited[nxt] = True
            last_used[bit] = step
            if first is None:
                first_used[bit] = step
            sequence.append(bit)

            if extend(nxt, step + 1):
                return True

            sequence.pop()
            first_used[bit] = first
            last_used[bit] = previous
            visited[nxt] = False
        return False

    try:
        found = extend(0, 0)
    except _BudgetExhausted:
        logger.debug("Gave up on a %d-bit code with min gap %d after %d nodes",
                     width, min_gap, max_nodes)
        return None
    return sequence if found else None


def search_transitions(width: int) -> List[int]:
    """
    Transition sequence of a width-bit code with the best reachable minimum gap

    Tries targets from min_gap_upper_bound(width) downwards; a gap of 1
    always succeeds (the reflected binary code).
    """
    for min_gap in range(min_gap_upper_bound(width), 0, -1):
        sequence = find_transitions(width, min_gap)
        if sequence is not None:
            logger.debug("Search found a %d-bit code with min gap %d", width, min_gap)
            return sequence
        logger.debug("No %d-bit code with min gap %d", width, min_gap)
    raise RuntimeError(f"Search failed for width {width}")


def search_beyond(width: int, min_gap: int, max_nodes: int) -> Optional[List[int]]:
    """
    Budgeted search for a width-bit code whose minimum gap exceeds min_gap

    Targets run from min_gap_upper_bound(width) down to min_gap + 1, each
    with its own node budget. Used to improve on a constructed code at
    widths too large for an unbounded search.

    Returns:
        Transition sequence of the first code found, or None
    """
    for target in range(min_gap_upper_bound(width), min_gap, -1):
        sequence = find_transitions(width, target, max_nodes)
        if sequence is not None:
            logger.debug("Budgeted search found a %d-bit code with min gap %d", width, target)
            return sequence
    return None

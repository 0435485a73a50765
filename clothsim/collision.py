import logging

import numpy as np

logger = logging.getLogger(__name__)


# rows of the distance matrix held at once by the broad phase
ROW_BLOCK = 256


def _candidate_pairs(particles, epsilon, row_block=ROW_BLOCK):
    """
    Broad phase: all index pairs (i < j) whose squared separation is within
    ``epsilon``, in row-major order.

    Squared distances come from |a|^2 + |b|^2 - 2 a.b one block of rows at a
    time, so memory stays at ``row_block * n`` floats. That form carries
    rounding error; the threshold is widened by a small slack and the exact
    check in ``find_collisions`` has the final say.
    """
    n = len(particles)
    if n < 2:
        return []
    pos = np.fromiter((c for p in particles for c in (p.pos.x, p.pos.y, p.pos.z)),
                      dtype=np.float64, count=3 * n).reshape(n, 3)
    sq = np.einsum('ij,ij->i', pos, pos)
    limit = epsilon * epsilon + 1e-12 * max(1.0, float(sq.max()))

    pairs = []
    for start in range(0, n, row_block):
        stop = min(start + row_block, n)
        block = pos[start:stop] @ pos.T
        block *= -2.0
        block += sq[start:stop, None]
        block += sq[None, :]
        # keep columns j > i for global row i = start + local row
        mask = np.triu(block <= limit, k=start + 1)
        i_idxs, j_idxs = np.nonzero(mask)
        pairs.extend(zip((i_idxs + start).tolist(), j_idxs.tolist()))
    return pairs


def find_collisions(particles, epsilon):
    """
    Detect particle pairs closer than ``epsilon``.

    Returns a list of pending ``(index, delta)`` corrections, two per close
    pair, equal and opposite. Nothing is moved here so every pair is judged
    against the same positions. Pairs at exactly zero separation produce no
    correction.
    """
    mods = []
    if epsilon <= 0.0:
        return mods
    for i, j in _candidate_pairs(particles, epsilon):
        diff = particles[j].pos - particles[i].pos
        d = diff.length()
        if d == 0.0:
            logger.debug(f"Skipping coincident particles {i} and {j}")
            continue
        if d < epsilon:
            # (1 - eps/d) < 0, so this points from j back toward i
            delta = diff * (1.0 - epsilon / d)
            mods.append((i, delta))
            mods.append((j, -delta))
    return mods


def apply_corrections(particles, mods):
    """Apply pending corrections through ``offset`` (pinned particles ignore them)."""
    for idx, delta in mods:
        particles[idx].offset(delta)


def resolve_collisions(particles, epsilon):
    """Detect then apply; returns the number of corrections pushed."""
    mods = find_collisions(particles, epsilon)
    apply_corrections(particles, mods)
    return len(mods)

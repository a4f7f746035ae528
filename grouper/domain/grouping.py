# grouper/domain/grouping.py
"""
Pure grouping logic for student groups.

Functions included:
- split_members
- reorganize_incremental
- reorganize_batch

Every function takes lists of Group / identifiers and returns fresh objects,
the input groups are never mutated. Final groups always have 2 or 3 members.
The only exception is a single identifier in total, which cannot form a
group: the result is then empty and a warning is logged.
"""
from typing import List, Optional
import logging
import random

from grouper.domain.models import Group, GROUP_CAPACITY, GROUP_MINIMUM

logger = logging.getLogger(__name__)


def split_members(members: List[str]) -> List[List[str]]:
    """
    Split members into consecutive chunks of 3, never leaving a chunk of 1.

    Chunks are taken greedily from the front. When exactly 4 members remain
    they become 2 + 2 instead of 3 + 1. A single member in total stays a
    chunk of 1, there is nothing to pair it with.

    Example:
    >>> split_members(["a", "b", "c", "d", "e", "f", "g"])
    [['a', 'b', 'c'], ['d', 'e'], ['f', 'g']]
    """
    chunks = []
    idx = 0
    n = len(members)
    while idx < n:
        remaining = n - idx
        if remaining == GROUP_CAPACITY + 1:
            size = GROUP_MINIMUM
        else:
            size = min(GROUP_CAPACITY, remaining)
        chunks.append(list(members[idx: idx + size]))
        idx += size
    return chunks


def reorganize_incremental(groups: List[Group], rng: Optional[random.Random] = None) -> List[Group]:
    """
    Keep full groups as they are and regroup everyone else at random.

    Members of partial groups are pooled, shuffled and cut into groups of 3
    (2 + 2 for a remainder of 4). A lone leftover borrows a member from the
    last full group so that nobody ends up alone.

    Output order: full groups first (input order), then the new groups.
    """
    rng = rng or random
    complete = [Group(members=list(g.members)) for g in groups if len(g) == GROUP_CAPACITY]
    pool = [m for g in groups if len(g) != GROUP_CAPACITY for m in g.members]
    rng.shuffle(pool)

    if not pool:
        return complete

    if len(pool) == 1:
        if not complete:
            logger.warning("Only one student (%s) was entered, no group can be formed", pool[0])
            return []
        borrowed = complete[-1].members.pop()
        logger.debug("Moved %s out of a full group to pair with %s", borrowed, pool[0])
        return complete + [Group(members=[borrowed, pool[0]])]

    new_groups = [Group(members=chunk) for chunk in split_members(pool)]
    logger.debug("Kept %d full groups, formed %d new groups from %d students",
                 len(complete), len(new_groups), len(pool))
    return complete + new_groups


def _settle_pending(pending: List[str], emitted: List[List[str]]) -> Optional[str]:
    """
    Place pending single students before the next real group.

    Two or more form groups of their own. A lone one tops up the previous
    group if it has room, otherwise it is returned to join the next group.
    """
    if len(pending) > 1:
        emitted.extend(split_members(pending))
        return None
    if emitted and len(emitted[-1]) < GROUP_CAPACITY:
        emitted[-1].append(pending[0])
        return None
    return pending[0]


def reorganize_batch(groups: List[Group]) -> List[Group]:
    """
    Deterministic repair of pre-formed groups (blank-line separated input).

    1. Groups larger than 3 are split into chunks of 2 or 3.
    2. Single students are collected. Three in a row form a group right away.
       Before the next real group two or more form their own group. A lone
       one tops up the previous group, or joins the next one if the previous
       group is full.
       At the end of input the leftovers form their own group, or a single
       one joins the previous group.
    3. Groups that grew to 4 in step 2 are split again.
    """
    chunks = []
    for g in groups:
        chunks.extend(split_members(g.members))

    emitted: List[List[str]] = []
    pending: List[str] = []
    for chunk in chunks:
        if len(chunk) == 1:
            pending.append(chunk[0])
            if len(pending) == GROUP_CAPACITY:
                emitted.append(pending)
                pending = []
            continue

        current = list(chunk)
        if pending:
            leftover = _settle_pending(pending, emitted)
            if leftover is not None:
                current.insert(0, leftover)
            pending = []
        emitted.append(current)

    if len(pending) > 1:
        emitted.append(pending)
    elif pending:
        if emitted:
            emitted[-1].append(pending[0])
        else:
            logger.warning("Only one student (%s) was entered, no group can be formed", pending[0])

    result = []
    for members in emitted:
        if len(members) > GROUP_CAPACITY:
            result.extend(Group(members=c) for c in split_members(members))
        else:
            result.append(Group(members=members))
    return result

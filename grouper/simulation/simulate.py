# grouper/simulation/simulate.py
"""
Simulation script: creates fake students, enters them as groups of random
size, reorganizes them and checks the result.

Uses the service directly (no stdin). Run from project root:
    python -m grouper.simulation.simulate [num_students] [--batch]
"""

import random
import sys
from typing import List, Optional

from faker import Faker

from grouper.config.settings import settings
from grouper.domain.labels import group_label
from grouper.domain.models import Group, Partition, GROUP_CAPACITY, GROUP_MINIMUM
from grouper.services.grouping_service import GroupingService

MAX_BATCH_GROUP = 7


def make_students(num_students: int, fake: Faker) -> List[str]:
    return [f"{fake.unique.bothify('S####')} {fake.first_name()}" for _ in range(num_students)]


def make_input_groups(students: List[str], batch_mode: bool, rng: random.Random) -> List[Group]:
    """Cut students into input groups: 1-3 per group interactive, 1-7 batch."""
    largest = MAX_BATCH_GROUP if batch_mode else GROUP_CAPACITY
    groups = []
    idx = 0
    while idx < len(students):
        size = rng.randint(1, largest)
        groups.append(Group(members=students[idx: idx + size]))
        idx += size
    return groups


def run_simulation(num_students: int = None, batch_mode: bool = False,
                   seed: Optional[int] = None) -> Partition:
    num_students = settings.SIMULATION_STUDENTS if num_students is None else num_students
    rng = random.Random(seed)
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)

    students = make_students(num_students, fake)
    groups = make_input_groups(students, batch_mode, rng)
    partition = GroupingService(settings, rng=rng).reorganize(groups, batch_mode=batch_mode)

    placed = [m for g in partition.groups for m in g.members]
    assert sorted(placed + partition.unplaced) == sorted(students), "students lost or duplicated"
    for g in partition.groups:
        assert GROUP_MINIMUM <= len(g) <= GROUP_CAPACITY, f"bad group size {len(g)}"
    return partition


if __name__ == "__main__":
    n = int(sys.argv[1]) if len(sys.argv) > 1 and sys.argv[1].isdigit() else None
    batch = "--batch" in sys.argv
    result = run_simulation(n, batch_mode=batch)
    print(f"Simulated {'batch' if batch else 'interactive'} grouping")
    for i, g in enumerate(result.groups):
        print(f"Group {group_label(i)}: {', '.join(g.members)}")
    if result.warning:
        print(f"[WARN] {result.warning}")

# tests/test_grouping_service.py
import random

from grouper.config.settings import Settings
from grouper.domain.models import Group
from grouper.services.grouping_service import GroupingService


def test_batch_mode_is_deterministic_split():
    service = GroupingService(Settings())
    partition = service.reorganize([Group(members=list("abcdefg"))], batch_mode=True)
    assert [len(g) for g in partition.groups] == [3, 2, 2]
    assert partition.unplaced == []
    assert partition.warning is None


def test_incremental_mode_borrows():
    service = GroupingService(Settings())
    groups = [Group(members=["a", "b", "c"]), Group(members=["d"])]
    partition = service.reorganize(groups)
    assert [g.members for g in partition.groups] == [["a", "b"], ["c", "d"]]


def test_single_student_warning():
    for batch_mode in (False, True):
        partition = GroupingService(Settings()).reorganize([Group(members=["S1"])], batch_mode=batch_mode)
        assert partition.groups == []
        assert partition.unplaced == ["S1"]
        assert "S1" in partition.warning


def test_empty_groups_are_dropped():
    groups = [Group(), Group(members=["a", "b"]), Group()]
    partition = GroupingService(Settings()).reorganize(groups)
    assert [g.members for g in partition.groups] == [["a", "b"]]


def test_no_input():
    partition = GroupingService(Settings()).reorganize([])
    assert partition.groups == []
    assert partition.warning is None


def test_seed_from_settings():
    groups = [Group(members=[f"S{i}", f"T{i}"]) for i in range(6)]
    first = GroupingService(Settings(RANDOM_SEED=3)).reorganize(groups)
    second = GroupingService(Settings(RANDOM_SEED=3)).reorganize(groups)
    assert [g.members for g in first.groups] == [g.members for g in second.groups]


def test_explicit_rng_wins_over_settings():
    groups = [Group(members=[f"S{i}"]) for i in range(8)]
    first = GroupingService(Settings(RANDOM_SEED=1), rng=random.Random(9)).reorganize(groups)
    second = GroupingService(Settings(), rng=random.Random(9)).reorganize(groups)
    assert [g.members for g in first.groups] == [g.members for g in second.groups]
    assert first.member_count == 8

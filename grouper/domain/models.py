# grouper/domain/models.py
from pydantic import BaseModel, Field
from typing import List, Optional

GROUP_CAPACITY = 3
GROUP_MINIMUM = 2


class Group(BaseModel):
    """
    Ordered list of student identifiers.

    add_member clamps at GROUP_CAPACITY. Batch input builds groups of any
    size with Group(members=[...]) and leaves the repair to the reorganizer.
    """
    members: List[str] = Field(default_factory=list)

    def add_member(self, student_id: str) -> None:
        if len(self.members) < GROUP_CAPACITY:
            self.members.append(student_id)

    def remove_member(self, student_id: str) -> bool:
        if student_id in self.members:
            self.members.remove(student_id)
            return True
        return False

    def is_full(self) -> bool:
        return len(self.members) >= GROUP_CAPACITY

    @property
    def size(self) -> int:
        return len(self.members)

    def __len__(self) -> int:
        return len(self.members)


class Partition(BaseModel):
    groups: List[Group] = Field(default_factory=list)
    unplaced: List[str] = Field(default_factory=list)
    warning: Optional[str] = None

    @property
    def member_count(self) -> int:
        return sum(len(g) for g in self.groups)

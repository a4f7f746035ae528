# grouper/services/grouping_service.py
import logging
import random
from collections import Counter
from typing import List, Optional

from grouper.config.settings import Settings, settings as default_settings
from grouper.domain.grouping import reorganize_batch, reorganize_incremental
from grouper.domain.models import Group, Partition, GROUP_MINIMUM

logger = logging.getLogger(__name__)


class GroupingService:
    def __init__(self, settings: Settings = None, rng: Optional[random.Random] = None):
        self.settings = settings or default_settings
        if rng is None and self.settings.RANDOM_SEED is not None:
            rng = random.Random(self.settings.RANDOM_SEED)
        self.rng = rng

    def reorganize(self, groups: List[Group], batch_mode: bool = False) -> Partition:
        """
        Pick the reorganizer for the input mode and wrap the result.

        Students that could not be placed (a single student in total) are
        reported in Partition.unplaced together with a warning message.
        """
        groups = [g for g in groups if len(g) > 0]
        submitted = Counter(m for g in groups for m in g.members)
        logger.info("Reorganizing %d groups (%d students, %s mode)",
                    len(groups), sum(submitted.values()), "batch" if batch_mode else "interactive")

        if batch_mode:
            final_groups = reorganize_batch(groups)
        else:
            final_groups = reorganize_incremental(groups, self.rng)

        placed = Counter(m for g in final_groups for m in g.members)
        unplaced = list((submitted - placed).elements())
        warning = None
        if unplaced:
            warning = (f"Only one student was entered ({', '.join(unplaced)}). "
                       f"At least {GROUP_MINIMUM} students are needed to form a group.")

        logger.info("Formed %d groups", len(final_groups))
        return Partition(groups=final_groups, unplaced=unplaced, warning=warning)

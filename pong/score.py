import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class ScoreEvent(Enum):
    # Names the side whose goal the ball went into
    LEFT = "left"
    RIGHT = "right"


@dataclass
class ScoreBoard:
    left: int = 0
    right: int = 0

    def record(self, event: ScoreEvent):
        """Credit the point to the side opposite the goal that was crossed."""
        if event is ScoreEvent.LEFT:
            self.right += 1
        else:
            self.left += 1
        logger.info("Goal on the %s side, score is now %s", event.value, self)

    def __str__(self):
        return f"{self.left}:{self.right}"

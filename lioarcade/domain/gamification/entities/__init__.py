from .gamification_aggregate import GamificationAggregate
from .progress_record import ProgressRecord

__all__ = ["GamificationAggregate", "ProgressRecord"]

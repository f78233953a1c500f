from .coordinator import PendingReorder, ReorderCoordinator
from .view import SectionView

__all__ = ["PendingReorder", "ReorderCoordinator", "SectionView"]

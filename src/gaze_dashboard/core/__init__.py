from .controller import IngestionController
from .protocols import IngestionView
from .state import IngestionState

__all__ = ["IngestionController", "IngestionView", "IngestionState"]

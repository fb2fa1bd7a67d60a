from typing import Protocol, runtime_checkable

from ..pipeline.metrics import DerivedMetrics

@runtime_checkable
class IngestionView(Protocol):
    """
    Defines the methods required for any presentation layer that follows a load.
    Progress values are integer percentages, non-decreasing within one load.
    """
    def show_read_progress(self, percent: int) -> None: ...

    def show_transform_progress(self, percent: int) -> None: ...

    def show_results(self, metrics: DerivedMetrics) -> None: ...

    def show_error(self, message: str) -> None: ...

"""Pick list processing workflow."""

from .pick_list_workflow import (
    PickListConfig,
    PickListResult,
    PickListWorkflow,
    run_pick_list,
)

__all__ = [
    "PickListConfig",
    "PickListResult",
    "PickListWorkflow",
    "run_pick_list",
]

"""Use cases for offboarding processes."""

from .approve_process import approve_process
from .create_process import instantiate_process
from .delete_process import delete_process
from .filters import (
    ProcessFilters,
    filter_processes,
    resolve_timeframe,
    sort_processes,
)
from .instantiation import ProcessOptions, build_process
from .list_processes import ProcessDetail, ProcessSummary, get_process, list_processes
from .progress import compute_progress, progress_custom_fields
from .refresh_overdue import OverdueSweepResult, refresh_overdue
from .transitions import update_process_status

__all__ = [
    "OverdueSweepResult",
    "ProcessDetail",
    "ProcessFilters",
    "ProcessOptions",
    "ProcessSummary",
    "approve_process",
    "build_process",
    "compute_progress",
    "delete_process",
    "filter_processes",
    "get_process",
    "instantiate_process",
    "list_processes",
    "progress_custom_fields",
    "refresh_overdue",
    "resolve_timeframe",
    "sort_processes",
    "update_process_status",
]

from .model import (
    SO_READY,
    SO_STATUSES,
    TRUCK_ASSIGNED,
    UNLOADED,
    SOEntry,
    assign_truck,
    available_orders,
    filter_so_entries,
    open_so,
    record_unload,
    so_from_record,
    so_to_record,
)

__all__ = [
    "SO_READY",
    "SO_STATUSES",
    "TRUCK_ASSIGNED",
    "UNLOADED",
    "SOEntry",
    "assign_truck",
    "available_orders",
    "filter_so_entries",
    "open_so",
    "record_unload",
    "so_from_record",
    "so_to_record",
]

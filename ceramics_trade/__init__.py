"""Order, invoice and advance/due ledger arithmetic for a tile-trading business."""

__version__ = "0.1.0"

"""Services — operations that sit above RecordStore but outside HTTP routes."""

"""botplug - pluggable executors and event sources for chat operations."""

__version__ = "0.1.0"

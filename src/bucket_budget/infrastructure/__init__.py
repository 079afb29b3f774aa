"""Infrastructure adapters: logging, settings, clocks and storage."""

"""I/O layer: driver adapters and record repositories."""

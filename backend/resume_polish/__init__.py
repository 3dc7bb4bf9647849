"""Resume section polishing backend."""

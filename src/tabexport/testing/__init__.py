"""Testing – in-memory doubles for the export engine's ports."""

"""Import analysis: resolution and the dependency tree used for diagnostics."""

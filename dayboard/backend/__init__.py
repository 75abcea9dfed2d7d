"""Personal dashboard backend: API, CLI, domain core."""

"""Domain logic: planning math, remote backend, stores, auth, widgets."""

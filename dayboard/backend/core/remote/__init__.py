"""Remote backend subpackage with lazy imports.

The HTTP client pulls in ``requests``; it is loaded on first access so the
in-memory backend and the change feed stay cheap to import.
"""

from __future__ import annotations

# Mapping of public names → (module, attribute)
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    # Interface
    "RemoteBackend": ("dayboard.backend.core.remote.base", "RemoteBackend"),
    "AuthUser": ("dayboard.backend.core.remote.base", "AuthUser"),
    "Session": ("dayboard.backend.core.remote.base", "Session"),
    # Change feed
    "ChangeEvent": ("dayboard.backend.core.remote.changes", "ChangeEvent"),
    "ChangeFeed": ("dayboard.backend.core.remote.changes", "ChangeFeed"),
    "ChangeKind": ("dayboard.backend.core.remote.changes", "ChangeKind"),
    # Implementations
    "InMemoryBackend": ("dayboard.backend.core.remote.memory", "InMemoryBackend"),
    "RestBackend": ("dayboard.backend.core.remote.rest", "RestBackend"),
}

__all__ = [*_LAZY_IMPORTS, "create_backend"]


def create_backend(config: dict) -> object:
    """Build the backend selected by the ``backend`` config section."""
    section = config.get("backend", {})
    mode = section.get("mode", "memory")
    if mode == "rest":
        from dayboard.backend.core.remote.rest import RestBackend

        return RestBackend(
            url=section.get("url", ""),
            anon_key=section.get("anon_key", ""),
            timeout=float(section.get("timeout", 30)),
        )
    if mode == "memory":
        from dayboard.backend.core.remote.memory import InMemoryBackend

        return InMemoryBackend()
    raise ValueError(f"Unknown backend mode: {mode!r}")


def __getattr__(name: str) -> object:
    """Lazily import public symbols on first access."""
    if name in _LAZY_IMPORTS:
        module_path, attr = _LAZY_IMPORTS[name]
        import importlib

        module = importlib.import_module(module_path)
        value = getattr(module, attr)
        # Cache on the module so __getattr__ is not called again
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

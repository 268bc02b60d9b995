"""Default option registry: per-backend baseline configuration.

Entries are immutable snapshots; re-registering a name replaces the snapshot.
Reads are plain dict lookups and safe to run concurrently once startup
registration is done.
"""

from typing import Optional

import structlog

from llm_validation.core.options import DEFAULT_CLIENT_NAME, BackendDefaults, normalize_model_name

logger = structlog.get_logger()


class DefaultOptionRegistry:
    """Holds the BackendDefaults registered for each backend name."""

    def __init__(self, fallback: Optional[BackendDefaults] = None):
        self._entries: dict[str, BackendDefaults] = {}
        self.register(DEFAULT_CLIENT_NAME, fallback or BackendDefaults())

    def register(self, name: Optional[str], defaults: Optional[BackendDefaults] = None, **overrides) -> BackendDefaults:
        """Store or replace the defaults for ``name``.

        Args:
            name: Backend name. Empty or None registers the fallback entry.
            defaults: Base snapshot; a default-constructed one is used if omitted.
            **overrides: Field values applied on top of ``defaults``.

        Returns:
            The stored snapshot, with ``model_name`` set to the registered name.
        """
        key = normalize_model_name(name)
        base = defaults or BackendDefaults()
        entry = BackendDefaults.model_validate({**base.model_dump(), **overrides, "model_name": key})
        self._entries[key] = entry
        logger.debug("backend_defaults_registered", model=key)
        return entry

    def lookup(self, name: Optional[str]) -> BackendDefaults:
        """Return the defaults for ``name``.

        An empty name returns the fallback entry. A name that was never
        registered gets the baseline defaults stamped with that name.
        """
        key = normalize_model_name(name)
        entry = self._entries.get(key)
        if entry is not None:
            return entry
        return BackendDefaults(model_name=key)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_model_name(name) in self._entries

"""Partial registration state for a ViewRenderer.

Two states: UNREGISTERED until the first registration pass completes, then
REGISTERED for the rest of the renderer's lifetime. Whether a pass runs is
decided separately by the cache_partials policy.
"""

from enum import Enum


class PartialsState(str, Enum):
    """Lifecycle of a renderer's partial registration."""

    UNREGISTERED = "unregistered"
    REGISTERED = "registered"


class PartialsStateManager:
    """Tracks whether partials have been registered at least once.

    Not guarded by a lock: concurrent renders may both run a registration
    pass, which rewrites the same name to source mapping.
    """

    def __init__(self):
        self._state = PartialsState.UNREGISTERED

    @property
    def state(self) -> PartialsState:
        return self._state

    @property
    def is_registered(self) -> bool:
        return self._state is PartialsState.REGISTERED

    def needs_registration(self, cache_partials: bool) -> bool:
        """Return True when a registration pass must run before rendering.

        Args:
            cache_partials: Whether registered partials may be reused

        Returns:
            True if caching is off or no pass has completed yet
        """
        return not cache_partials or not self.is_registered

    def mark_registered(self) -> None:
        self._state = PartialsState.REGISTERED

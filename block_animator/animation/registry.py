"""At most one active animation per block.

Acquiring a key that is already held releases the previous instance first;
nothing is queued.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, Optional

logger = logging.getLogger(__name__)


class ActiveAnimationRegistry:
    def __init__(self, on_release: Optional[Callable[[str, Any], None]] = None) -> None:
        self._active: Dict[str, Any] = {}
        self._on_release = on_release

    def acquire(self, key: str, instance: Any) -> Optional[Any]:
        """Store ``instance`` for ``key``; return the released previous instance, if any."""
        previous = self.release(key)
        self._active[key] = instance
        return previous

    def release(self, key: str) -> Optional[Any]:
        instance = self._active.pop(key, None)
        if instance is not None:
            logger.debug("Releasing active animation", extra={"block_id": key})
            if self._on_release is not None:
                self._on_release(key, instance)
        return instance

    def release_all(self) -> int:
        keys = list(self._active)
        for key in keys:
            self.release(key)
        return len(keys)

    def get(self, key: str) -> Optional[Any]:
        return self._active.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._active

    def __len__(self) -> int:
        return len(self._active)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._active))

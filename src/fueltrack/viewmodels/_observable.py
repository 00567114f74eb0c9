"""Observable pydantic model used as the base for view state."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr

_logger = logging.getLogger(__name__)

Listener = Callable[[str, Any, Any], None]
"""``listener(field_name, old_value, new_value)``."""


class ObservableModel(BaseModel):
    """A model whose field assignments notify subscribers.

    Listeners fire synchronously, on the thread doing the assignment, and
    only when the new value differs from the old one.
    """

    model_config = ConfigDict(validate_assignment=True)

    _listeners: list[tuple[frozenset[str], Listener]] = PrivateAttr(default_factory=list)

    def subscribe(self, listener: Listener, *fields: str) -> Callable[[], None]:
        """Register *listener* for *fields* (all fields when none are given).

        Returns a callable that removes the subscription.
        """
        unknown = set(fields) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"{type(self).__name__} has no field(s) {sorted(unknown)}")
        entry = (frozenset(fields), listener)
        self._listeners.append(entry)

        def _unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._listeners.remove(entry)

        return _unsubscribe

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in type(self).model_fields:
            super().__setattr__(name, value)
            return
        old = getattr(self, name)
        super().__setattr__(name, value)
        new = getattr(self, name)
        if new != old:
            self._notify(name, old, new)

    def _notify(self, name: str, old: Any, new: Any) -> None:
        for fields, listener in list(self._listeners):
            if fields and name not in fields:
                continue
            try:
                listener(name, old, new)
            except Exception:
                _logger.warning("%s listener for %r failed", type(self).__name__, name, exc_info=True)

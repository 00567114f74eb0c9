"""Text screen bound to one observable view model."""

from __future__ import annotations

import abc
import sys
from collections.abc import Callable
from typing import Any, ClassVar, Generic, TextIO, TypeVar

from fueltrack.viewmodels._observable import ObservableModel

VM = TypeVar("VM", bound=ObservableModel)


class Screen(abc.ABC, Generic[VM]):
    """Writes a fresh frame to *out* whenever a watched field changes."""

    watched_fields: ClassVar[tuple[str, ...]] = ()
    help_text: ClassVar[str] = ""

    def __init__(self, view_model: VM, *, out: TextIO | None = None) -> None:
        self.view_model = view_model
        self._out = out if out is not None else sys.stdout
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def is_attached(self) -> bool:
        return self._unsubscribe is not None

    def attach(self) -> None:
        """Start following the view model and draw the first frame."""
        if self._unsubscribe is None:
            self._unsubscribe = self.view_model.subscribe(self._on_change, *self.watched_fields)
        self.redraw()

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def redraw(self) -> None:
        frame = self.render()
        if self.help_text:
            frame = f"{frame}\n{self.help_text}"
        self._out.write(frame + "\n")
        self._out.flush()

    @abc.abstractmethod
    def render(self) -> str:
        """Return the frame for the current view state, without help text."""

    def _on_change(self, _name: str, _old: Any, _new: Any) -> None:
        self.redraw()


def header(title: str) -> str:
    return f"== {title} =="

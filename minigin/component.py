"""Base class for behaviour attached to a game object."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from minigin.delegate import MulticastDelegate

if TYPE_CHECKING:
    from minigin.game_object import GameObject


class ComponentOwnerError(Exception):
    """Raised when a component that already has an owner is given another."""


class Component:
    """Behaviour attached to one game object, ordered by priority.

    Each phase of the frame loop broadcasts a delegate, so handlers can be
    attached without subclassing.
    """

    def __init__(self, priority: int = 0) -> None:
        self.priority = priority
        self._owner: Optional["GameObject"] = None
        self.on_update = MulticastDelegate()
        self.on_fixed_update = MulticastDelegate()
        self.on_render = MulticastDelegate()
        self.on_begin_play = MulticastDelegate()

    @property
    def owner(self) -> Optional["GameObject"]:
        return self._owner

    def set_owner(self, game_object: "GameObject") -> None:
        if self._owner is not None:
            raise ComponentOwnerError(f"{type(self).__name__} already has an owner")
        self._owner = game_object

    def __lt__(self, other: "Component") -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return self.priority < other.priority

    def update(self) -> None:
        """Called once per frame."""
        self.on_update.broadcast()

    def fixed_update(self) -> None:
        """Called once per fixed time step."""
        self.on_fixed_update.broadcast()

    def render(self) -> None:
        """Called when the owner is drawn."""
        self.on_render.broadcast()

    def begin_play(self) -> None:
        """Called when the owner's scene starts."""
        self.on_begin_play.broadcast()
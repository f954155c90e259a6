"""Positions of game objects, local and in the world."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass
class Transform:
    """A local position and the world position last computed from it."""

    local_position: Vec3 = field(default_factory=Vec3)
    world_position: Vec3 = field(default_factory=Vec3)

    def update_world_position(self, position: Vec3) -> None:
        self.world_position = position

    def set_position(self, x: float, y: float, z: float = 0.0) -> None:
        self.local_position = Vec3(x, y, z)
"""Axis-aligned rigid bodies that fall, push each other and rest on platforms."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from .matrix import Mat3
from .rect import Rect, RectSide, rect_impulse, rect_object_impact, rect_snap, rects_overlap
from .sprite_font import FONT_CHAR_HEIGHT
from .vec import Vec

COLLISION_ITERATIONS = 100
_FRICTION = Vec(-16.0, 0.0)


class Platforms:
    """Static solid rectangles the bodies collide with."""

    def __init__(self, rects: Iterable[Rect] = ()) -> None:
        self.rects: tuple[Rect, ...] = tuple(rects)

    def touches_rect_sides(self, rect: Rect) -> tuple[bool, ...]:
        """Which sides of rect touch any platform, indexed by RectSide."""
        sides = [False] * len(RectSide)
        for platform in self.rects:
            for side, hit in enumerate(rect_object_impact(rect, platform)):
                sides[side] = sides[side] or hit
        return tuple(sides)

    def snap_rect(self, rect: Rect) -> tuple[Rect, Vec]:
        """Push rect out of every platform it overlaps.

        Returns the moved rectangle and the combined velocity mask.
        """
        mask = Vec(1.0, 1.0)
        for platform in self.rects:
            if rects_overlap(platform, rect):
                rect, snap_mask = rect_snap(platform, rect)
                mask = mask.entry_mult(snap_mask)
        return rect, mask


@dataclass
class _Body:
    rect: Rect
    velocity: Vec = field(default_factory=Vec)
    movement: Vec = field(default_factory=Vec)
    force: Vec = field(default_factory=Vec)
    grounded: bool = False
    deleted: bool = False
    disabled: bool = False

    @property
    def inactive(self) -> bool:
        return self.deleted or self.disabled


class RigidBodies:
    """A fixed-capacity pool of rigid bodies addressed by integer ids."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._bodies: list[_Body] = []

    def __len__(self) -> int:
        return len(self._bodies)

    def _body(self, body_id: int) -> _Body:
        if not 0 <= body_id < len(self._bodies):
            raise IndexError(f"no rigid body with id {body_id}")
        return self._bodies[body_id]

    def add(self, rect: Rect) -> int:
        """Add a body and return its id."""
        if len(self._bodies) >= self.capacity:
            raise OverflowError("no room for another rigid body")
        self._bodies.append(_Body(rect))
        return len(self._bodies) - 1

    def remove(self, body_id: int) -> None:
        """Mark the body as deleted; its id is never reused."""
        self._body(body_id).deleted = True

    def hitbox(self, body_id: int) -> Rect:
        return self._body(body_id).rect

    def move(self, body_id: int, movement: Vec) -> None:
        """Set the body's self-propelled movement velocity."""
        body = self._body(body_id)
        if not body.inactive:
            body.movement = movement

    def touches_ground(self, body_id: int) -> bool:
        return self._body(body_id).grounded

    def apply_force(self, body_id: int, force: Vec) -> None:
        body = self._body(body_id)
        if not body.inactive:
            body.force = body.force + force

    def apply_omniforce(self, force: Vec) -> None:
        """Apply the force to every body."""
        for body_id in range(len(self._bodies)):
            self.apply_force(body_id, force)

    def transform_velocity(self, body_id: int, matrix: Mat3) -> None:
        body = self._body(body_id)
        if not body.inactive:
            body.velocity = matrix.transform_point(body.velocity)

    def teleport_to(self, body_id: int, position: Vec) -> None:
        body = self._body(body_id)
        if not body.inactive:
            body.rect = replace(body.rect, x=position.x, y=position.y)

    def damper(self, body_id: int, v: Vec) -> None:
        """Apply a force proportional to the velocity, component-wise."""
        body = self._body(body_id)
        if not body.inactive:
            self.apply_force(body_id, body.velocity.entry_mult(v))

    def disable(self, body_id: int, disabled: bool) -> None:
        self._body(body_id).disabled = disabled

    def update(self, body_id: int, delta_time: float) -> None:
        """Integrate the accumulated force and move the body."""
        body = self._body(body_id)
        if body.inactive:
            return
        body.velocity = body.velocity + body.force.scale(delta_time)
        shift = (body.velocity + body.movement).scale(delta_time)
        body.rect = replace(body.rect, x=body.rect.x + shift.x, y=body.rect.y + shift.y)
        body.force = Vec(0.0, 0.0)

    def collide(self, platforms: Platforms) -> None:
        """Resolve collisions with the platforms and between the bodies."""
        bodies = self._bodies
        for body in bodies:
            body.grounded = False
        if not bodies:
            return

        for _ in range(COLLISION_ITERATIONS):
            collided = False
            for i1, body1 in enumerate(bodies):
                if body1.inactive:
                    continue

                sides = platforms.touches_rect_sides(body1.rect)
                if any(sides):
                    collided = True
                if sides[RectSide.BOTTOM]:
                    body1.grounded = True

                body1.rect, mask = platforms.snap_rect(body1.rect)
                body1.velocity = body1.velocity.entry_mult(mask)
                body1.movement = body1.movement.entry_mult(mask)
                self.damper(i1, mask.entry_mult(_FRICTION))

                for body2 in bodies[i1 + 1:]:
                    if body2.deleted:
                        continue
                    if not rects_overlap(body1.rect, body2.rect):
                        continue
                    collided = True
                    body1.rect, body2.rect, orient = rect_impulse(body1.rect, body2.rect)
                    if orient.x > orient.y:
                        if body1.rect.y < body2.rect.y:
                            body1.grounded = True
                        else:
                            body2.grounded = True
                    body1.velocity = body1.velocity.entry_mult(orient)
                    body2.velocity = body2.velocity.entry_mult(orient)
                    body1.movement = body1.movement.entry_mult(orient)
                    body2.movement = body2.movement.entry_mult(orient)
            if not collided:
                break

    def debug_text(self, body_id: int) -> list[tuple[str, Vec]]:
        """Debug labels of the body with their world positions.

        Deleted and disabled bodies have none.
        """
        body = self._body(body_id)
        if body.inactive:
            return []
        r = body.rect
        lines = [
            f"id: {body_id}",
            f"p:({r.x:.2f}, {r.y:.2f})",
            f"v:({body.velocity.x:.2f}, {body.velocity.y:.2f})",
            f"m:({body.movement.x:.2f}, {body.movement.y:.2f})",
        ]
        return [(text, Vec(r.x, r.y + FONT_CHAR_HEIGHT * 2.0 * i))
                for i, text in enumerate(lines)]
"""Badge geometry and scale animation."""

import asyncio
import math
import logging
import time
from typing import Callable

from config import settings
from userpic.models.badge import AnimationPhase, BadgeSpec, BadgeVisualState
from userpic.utilities import (
    clamp,
    format_badge_value,
    is_present,
    is_text_content,
    pixel_snap,
)

logger = logging.getLogger(__name__)

MIN_SIZE = 15
MAX_SIZE = 45

SPRING_TENSION = 50
SPRING_FRICTION = 6
REST_DISPLACEMENT_THRESHOLD = 0.001
REST_SPEED_THRESHOLD = 0.001


def badge_height(size: float, has_text_content: bool) -> float:
    """Text badges use the clamped size, indicator badges half of it."""
    height = clamp(size, MIN_SIZE, MAX_SIZE)
    return height if has_text_content else height / 2


def corner_offset(parent_radius: float, height: float, ratio: float = None) -> float:
    """Distance from the parent's corner edges to the badge.

    The edge term finds the point at 45 degrees on the parent's rounded corner;
    the self term pulls the badge inward so it straddles that edge. The pull
    shrinks as the badge grows relative to the parent radius.
    """
    edge_offset = parent_radius * (1 - math.sin(math.radians(45)))
    self_offset = (1 + clamp(parent_radius / height, 0, 1)) * (height / 4)
    return pixel_snap(edge_offset - self_offset, ratio)


def stiffness_from_tension(tension: float) -> float:
    """Convert an origami tension to a spring stiffness."""
    return (tension - 30) * 3.62 + 194


def damping_from_friction(friction: float) -> float:
    """Convert an origami friction to a spring damping."""
    return (friction - 8) * 3 + 25


class Spring:
    """Closed-form damped spring from one value to another."""

    def __init__(
        self,
        from_value: float,
        to_value: float,
        tension: float = SPRING_TENSION,
        friction: float = SPRING_FRICTION,
        velocity: float = 0.0,
        mass: float = 1.0,
    ):
        """Initialize the spring."""
        self.from_value = from_value
        self.to_value = to_value
        self.stiffness = stiffness_from_tension(tension)
        self.damping = damping_from_friction(friction)
        self.mass = mass
        self.initial_velocity = velocity

    def sample(self, t: float):
        """Position and velocity after t seconds."""
        k, c, m = self.stiffness, self.damping, self.mass
        zeta = c / (2 * math.sqrt(k * m))
        omega0 = math.sqrt(k / m)
        x0 = self.to_value - self.from_value
        v0 = -self.initial_velocity

        if zeta < 1:
            omega1 = omega0 * math.sqrt(1 - zeta * zeta)
            envelope = math.exp(-zeta * omega0 * t)
            sin, cos = math.sin(omega1 * t), math.cos(omega1 * t)
            a = (v0 + zeta * omega0 * x0) / omega1
            position = self.to_value - envelope * (a * sin + x0 * cos)
            velocity = zeta * omega0 * envelope * (a * sin + x0 * cos) - envelope * (
                cos * (v0 + zeta * omega0 * x0) - omega1 * x0 * sin
            )
        else:
            envelope = math.exp(-omega0 * t)
            position = self.to_value - envelope * (x0 + (v0 + omega0 * x0) * t)
            velocity = envelope * (v0 * (t * omega0 - 1) + t * x0 * (omega0 * omega0))
        return position, velocity

    def at_rest(self, position: float, velocity: float) -> bool:
        """Whether the spring has settled."""
        return (
            abs(velocity) <= REST_SPEED_THRESHOLD
            and abs(self.to_value - position) <= REST_DISPLACEMENT_THRESHOLD
        )


class ScaleAnimation:
    """Owned scale value of a badge.

    Appearing springs to 1, disappearing snaps to 0. The spring is anchored to
    the clock reading at which it started, so tick() can sample it whenever the
    host renders. A scheduler may instead call step() once per frame, or await
    run() to let this object drive itself.
    """

    def __init__(self, visible: bool, clock: Callable[[], float] = None):
        """Initialize the animation at rest."""
        self.clock = clock or time.monotonic
        self.value = 1.0 if visible else 0.0
        self.target = self.value
        self.velocity = 0.0
        self.spring: Spring = None
        self.started_at = 0.0
        self.elapsed = 0.0

    @property
    def animating(self) -> bool:
        """Whether a spring is in flight."""
        return self.spring is not None

    @property
    def phase(self) -> AnimationPhase:
        """Current animation phase."""
        if self.animating:
            return AnimationPhase.entering
        return AnimationPhase.shown if self.value >= 1 else AnimationPhase.hidden

    def set_target(self, target: float, animate: bool = True):
        """Move toward a new target, springing in or snapping out."""
        self.target = float(target)
        if not animate or target != 1:
            self.jump(target)
        elif not self.animating and self.value != target:
            self.spring = Spring(self.value, self.target, velocity=self.velocity)
            self.started_at = self.clock()
            self.elapsed = 0.0

    def jump(self, value: float):
        """Set the value immediately and stop any spring."""
        self.value = float(value)
        self.velocity = 0.0
        self.spring = None

    def _advance(self, elapsed: float) -> float:
        if not self.animating:
            return self.value
        self.elapsed = max(self.elapsed, elapsed)
        position, velocity = self.spring.sample(self.elapsed)
        if self.spring.at_rest(position, velocity):
            self.jump(self.spring.to_value)
        else:
            self.value, self.velocity = position, velocity
        return self.value

    def step(self, dt: float) -> float:
        """Advance the spring by dt seconds and return the new value."""
        return self._advance(self.elapsed + dt)

    def tick(self, now: float = None) -> float:
        """Bring the spring up to the clock reading and return the new value."""
        now = self.clock() if now is None else now
        return self._advance(now - self.started_at)

    async def run(self, frame_interval: float = None):
        """Step once per frame until the spring settles."""
        frame_interval = frame_interval or settings.FRAME_INTERVAL
        while self.animating:
            await asyncio.sleep(frame_interval)
            self.step(frame_interval)
        return self.value


class BadgeEngine:
    """Derives the visual state of one badge across renders."""

    def __init__(self, spec: BadgeSpec, clock: Callable[[], float] = None):
        """Initialize the engine with the props at mount."""
        self.spec = spec
        self.animation = ScaleAnimation(is_present(spec.value), clock)

    def update(self, spec: BadgeSpec):
        """Apply new props and retarget the scale animation."""
        self.spec = spec
        self.animation.set_target(1.0 if is_present(spec.value) else 0.0, animate=spec.animate)

    def layout(self, ratio: float = None) -> BadgeVisualState:
        """Visual state of the badge, or None when there is nothing to draw."""
        spec = self.spec
        if not is_present(spec.value):
            return None

        has_text_content = is_text_content(spec.value)
        height = badge_height(spec.size, has_text_content)
        offset = corner_offset(spec.parentRadius, height, ratio)

        anchors = {}
        if spec.position:
            vertical, horizontal = spec.position.anchors
            anchors = {vertical: offset, horizontal: offset}

        self.animation.tick()
        logger.debug(f"RENDER <Badge> {spec.value!r}")

        return BadgeVisualState(
            height=height,
            minWidth=height,
            hasTextContent=has_text_content,
            displayText=format_badge_value(spec.value, spec.limit) if has_text_content else None,
            node=None if has_text_content else spec.value,
            offset=offset,
            anchors=anchors,
            borderRadius=spec.radius if spec.radius is not None else height / 2,
            backgroundColor=spec.color,
            scale=self.animation.value,
            animationPhase=self.animation.phase,
        )


def layout_badge(spec: BadgeSpec, ratio: float = None) -> BadgeVisualState:
    """One-off layout of a badge mounted with the given props."""
    return BadgeEngine(spec).layout(ratio)

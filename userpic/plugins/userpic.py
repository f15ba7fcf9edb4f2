"""Avatar composition: resolved image or initials, with an optional badge."""

import logging
from typing import Callable

from userpic.avatar_generator import derive_identity, generate_initials_svg
from userpic.models.avatar import (
    AvatarPresentation,
    AvatarRequest,
    ResolvedAvatar,
    SourceKind,
)
from userpic.models.badge import BadgePosition, BadgeSpec
from userpic.plugins.badge import BadgeEngine
from userpic.plugins.resolver import AvatarResolver
from userpic.utilities import clamp, default_color

logger = logging.getLogger(__name__)


class Userpic:
    """One avatar instance.

    Owns its source resolver and, when a badge is configured, its badge engine.
    Name and colorize changes only affect the initials presentation.
    """

    def __init__(self, request: AvatarRequest, clock: Callable[[], float] = None):
        """Mount the avatar with its first props."""
        self.request = request
        self.clock = clock
        self.resolver = AvatarResolver(request)
        self.badge: BadgeEngine = None
        self._update_badge()

    @property
    def generation(self) -> int:
        """Generation of the current source resolution."""
        return self.resolver.generation

    @property
    def border_radius(self) -> float:
        """Corner radius of the avatar shape."""
        size = self.request.size
        radius = size / 2 if self.request.radius is None else self.request.radius
        return clamp(radius, 0, size / 2)

    def badge_spec(self) -> BadgeSpec:
        """Badge props: overrides first, then the values the avatar owns."""
        request = self.request
        options = {}
        if request.badgeProps:
            options = request.badgeProps.model_dump(exclude_unset=True, exclude_none=True)
        options.setdefault("position", BadgePosition.TOP_RIGHT)
        if request.badgeColor is not None:
            options["color"] = request.badgeColor
        return BadgeSpec(**options, value=request.badge, parentRadius=self.border_radius)

    def _update_badge(self):
        if self.request.badge is None:
            self.badge = None
            return
        spec = self.badge_spec()
        if self.badge is None:
            self.badge = BadgeEngine(spec, self.clock)
        else:
            self.badge.update(spec)

    def update(self, request: AvatarRequest) -> bool:
        """Apply new props. Returns True when the source was resolved again."""
        self.request = request
        self._update_badge()
        return self.resolver.update(request)

    def report_load_failure(self, generation: int = None) -> bool:
        """Forward an image load failure to the resolver."""
        return self.resolver.report_load_failure(generation)

    @property
    def shows_initials(self) -> bool:
        """Initials replace the default image whenever a name is known."""
        return bool(self.request.name) and self.resolver.on_default

    def resolve(self) -> ResolvedAvatar:
        """Resolution outcome as seen by the surface."""
        request = self.request
        if self.shows_initials:
            identity = derive_identity(request.name, request.colorize)
            return ResolvedAvatar(
                effectiveSourceKind=SourceKind.initials,
                effectiveSource=None,
                initials=identity.initials,
                derivedColor=identity.color,
                generation=self.generation,
            )
        return ResolvedAvatar(
            effectiveSourceKind=self.resolver.kind,
            effectiveSource=self.resolver.image_source,
            generation=self.generation,
        )

    def render(self, ratio: float = None) -> AvatarPresentation:
        """Render-ready presentation of the avatar."""
        request = self.request
        resolved = self.resolve()
        background = request.color or default_color()
        border_radius = self.border_radius

        logger.debug(f"RENDER <Userpic> {request.name or request.email or resolved.effectiveSource}")

        presentation = AvatarPresentation(
            size=request.size,
            borderRadius=border_radius,
            backgroundColor=background,
            kind=AvatarPresentation.Kind.image,
            source=resolved.effectiveSource,
            resolved=resolved,
            badge=self.badge.layout(ratio) if self.badge else None,
        )
        if resolved.effectiveSourceKind == SourceKind.initials:
            fill = resolved.derivedColor or background
            presentation.kind = AvatarPresentation.Kind.initials
            presentation.initials = resolved.initials
            presentation.initialsColor = fill
            presentation.initialsSvg = generate_initials_svg(
                resolved.initials, fill, request.size, border_radius
            )
        return presentation

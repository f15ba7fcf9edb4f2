"""Avatar models."""

from enum import Enum
from typing import Union

from pydantic import Field, field_validator
from .base import CustomBaseModel
from .badge import BadgeOptions, BadgeValue, BadgeVisualState
from .image import ImageSource
from config import settings


class SourceKind(str, Enum):
    """Where the effective avatar presentation comes from."""

    explicit = "explicit"
    remote = "remote"
    default = "default"
    initials = "initials"


class AvatarRequest(CustomBaseModel):
    """Props of an avatar."""

    size: float = Field(settings.AVATAR_SIZE)
    name: Union[str, None] = Field(None, json_schema_extra={"example": "Jane Doe"})
    email: Union[str, None] = Field(None, json_schema_extra={"example": "jane@example.com"})
    source: Union[ImageSource, None] = Field(None)
    defaultSource: Union[ImageSource, None] = Field(None)
    color: Union[str, None] = Field(None)
    radius: Union[float, None] = Field(None)
    colorize: bool = Field(False)
    badge: BadgeValue = Field(None)
    badgeColor: Union[str, None] = Field(None)
    badgeProps: Union[BadgeOptions, None] = Field(None)

    @field_validator("size")
    @classmethod
    def size_validator(cls, value):
        """Validate the size field."""
        assert value > 0, "Avatar size must be positive."
        return value

    def source_key(self):
        """Inputs that trigger a new source resolution when they change."""
        return (self.source, self.size, self.email, self.defaultSource)


class ResolvedAvatar(CustomBaseModel):
    """Outcome of source resolution."""

    effectiveSourceKind: SourceKind = Field()
    effectiveSource: Union[ImageSource, None] = Field(None)
    initials: Union[str, None] = Field(None)
    derivedColor: Union[str, None] = Field(None)
    generation: int = Field(0)


class AvatarPresentation(CustomBaseModel):
    """Render-ready avatar."""

    class Kind(str, Enum):
        """What the surface draws inside the avatar shape."""

        image = "image"
        initials = "initials"

    size: float = Field()
    borderRadius: float = Field()
    backgroundColor: str = Field()
    kind: Kind = Field()
    source: Union[ImageSource, None] = Field(None)
    initials: Union[str, None] = Field(None)
    initialsColor: Union[str, None] = Field(None)
    initialsSvg: Union[str, None] = Field(None)
    resolved: ResolvedAvatar = Field()
    badge: Union[BadgeVisualState, None] = Field(None)

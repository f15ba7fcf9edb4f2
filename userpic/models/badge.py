"""Badge models."""

from enum import Enum
from typing import Any, Dict, Union

from pydantic import Field
from .base import CustomBaseModel
from config import settings


class BadgePosition(str, Enum):
    """Corner of the parent a badge is anchored to."""

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def anchors(self):
        """Vertical and horizontal edge names, e.g. ("top", "right")."""
        vertical, horizontal = self.value.split("-")
        return vertical, horizontal


class AnimationPhase(str, Enum):
    """Scale animation phase of a badge."""

    hidden = "hidden"
    entering = "entering"
    shown = "shown"


BadgeValue = Union[bool, int, float, str, Dict[str, Any], None]


class BadgeOptions(CustomBaseModel):
    """Badge settings a parent avatar lets callers override."""

    size: float = Field(settings.BADGE_SIZE)
    radius: Union[float, None] = Field(None, ge=0)
    animate: bool = Field(True)
    limit: int = Field(settings.BADGE_LIMIT, ge=0)
    position: Union[BadgePosition, None] = Field(None)


class BadgeSpec(BadgeOptions):
    """Inputs of a single badge."""

    color: str = Field(settings.BADGE_COLOR)
    value: BadgeValue = Field(None, json_schema_extra={"example": 12})
    parentRadius: float = Field(0, ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "size": 20,
                    "value": 12,
                    "limit": 9,
                    "parentRadius": 25,
                    "position": "top-right",
                }
            ]
        }
    }


class BadgeVisualState(CustomBaseModel):
    """Everything the surface needs to draw a badge."""

    height: float = Field()
    minWidth: float = Field()
    hasTextContent: bool = Field()
    displayText: Union[str, None] = Field(None)
    node: Any = Field(None)
    offset: float = Field()
    anchors: Dict[str, float] = Field(default_factory=dict)
    borderRadius: float = Field()
    backgroundColor: str = Field()
    scale: float = Field()
    animationPhase: AnimationPhase = Field()

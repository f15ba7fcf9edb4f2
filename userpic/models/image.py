"""Image source model."""

from typing import Dict, Union

from pydantic import Field
from .base import CustomBaseModel


class ImageSource(CustomBaseModel):
    """Opaque image descriptor handed to the image loader."""

    uri: str = Field(json_schema_extra={"example": "https://example.com/avatar.png"})
    width: Union[float, None] = Field(None)
    height: Union[float, None] = Field(None)
    headers: Union[Dict[str, str], None] = Field(None)

    model_config = {"frozen": True}

    def __hash__(self):
        """Hash by value so sources can be part of a cache key."""
        headers = tuple(sorted(self.headers.items())) if self.headers else None
        return hash((self.uri, self.width, self.height, headers))

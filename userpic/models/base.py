"""Base model."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class CustomBaseModel(BaseModel):
    """Base model for all userpic models."""

    model_config = ConfigDict(populate_by_name=True)

    def model_dump(self, **kwargs) -> Dict[str, Any]:
        """Dump the model by alias. Optional fields without a value dump as None."""
        kwargs.setdefault("by_alias", True)
        return super().model_dump(**kwargs)

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _blank_to_none(value: Any) -> Any:
    # HTML number inputs post "" when left empty
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


Amount = Annotated[Optional[float], BeforeValidator(_blank_to_none)]


class CamelModel(BaseModel):
    """JSON uses camelCase keys; Python code uses the snake_case field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatchModel(CamelModel):
    """Input payload. Unknown keys are rejected instead of being merged."""
    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class RecordModel(CamelModel):
    """Output payload built from an ORM object."""
    model_config = ConfigDict(from_attributes=True)

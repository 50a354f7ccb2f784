from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request body accepting either camelCase (admin UI) or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def changes(self) -> dict[str, Any]:
        """Only the fields the client actually sent, snake_case."""
        return self.model_dump(exclude_unset=True, by_alias=False)


class DisplayOrderItem(CamelModel):
    id: int
    display_order: int


class GiveawayOrder(BaseModel):
    order: list[int]

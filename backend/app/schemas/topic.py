"""Topic Schemas — public shape of a topic."""

from pydantic import BaseModel, ConfigDict


class TopicResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    slug: str
    description: str | None = None

"""Category domain entity."""

from pydantic import BaseModel


class Category(BaseModel):
    """Product category, identified by its unique trimmed name."""

    name: str

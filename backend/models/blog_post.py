"""
BlogPost MongoDB Schema

Defines the BlogPost document model for the 'blogposts' collection.

Schema Fields:
- _id: ObjectId (MongoDB auto-generated)
- author: Embedded object with firstName and lastName
- title: Post title
- content: Post body
- created: Creation timestamp (UTC)
"""

from pydantic import BaseModel, ConfigDict, Field

from database.base import BaseDocument


class Author(BaseModel):
    """Embedded author name, stored with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")

    @property
    def display_name(self) -> str:
        """Single display string shown to API clients."""
        return f"{self.first_name} {self.last_name}".strip()


class BlogPost(BaseDocument):
    """A blog post document."""

    author: Author
    title: str
    content: str

    class Settings:
        name = "blogposts"

"""
MongoDB ODM Models Package

Collections:
- blogposts: Blog posts with embedded author names
"""

from typing import List, Type

from beanie import Document

from models.blog_post import Author, BlogPost


def get_document_models() -> List[Type[Document]]:
    """Document models registered with Beanie on startup."""
    return [BlogPost]


__all__ = [
    "Author",
    "BlogPost",
    "get_document_models",
]

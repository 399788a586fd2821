"""SQLAlchemy ORM models.

Models represent database tables:
- content_documents: JSONB documents for every content collection
"""

from kopi_content.models.document import ContentDocument

__all__ = ["ContentDocument"]

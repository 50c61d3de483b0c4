"""Database Metadata — SQLAlchemy declarative Base shared by every ORM model."""

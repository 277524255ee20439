"""Database Metadata — SQLAlchemy declarative base shared by every model."""

"""Database Package — SQLAlchemy declarative Base shared by models and migrations."""

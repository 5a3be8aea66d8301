"""SQLAlchemy persistence: ORM models and the unit of work."""

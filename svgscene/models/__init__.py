"""Scene document data model and API schemas."""

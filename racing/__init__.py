"""Race and event data access service."""

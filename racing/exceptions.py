"""Repository error types."""


class RepositoryError(Exception):
    """Base class for data access failures."""


class InitializationError(RepositoryError):
    """Seeding failed. Permanent for the lifetime of the repository."""


class QueryExecutionError(RepositoryError):
    """The store rejected or could not run a query."""


class RowDecodeError(RepositoryError):
    """A fetched row does not have the expected shape."""


class TimestampConversionError(RepositoryError):
    """A stored timestamp could not be converted to an absolute instant."""

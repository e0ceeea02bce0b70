"""Custom exception hierarchy for the search quality engine."""


class QualityEngineError(Exception):
    """Base exception for all search quality engine errors."""


class ConfigurationError(QualityEngineError):
    """Error in system configuration."""


class StorageError(QualityEngineError):
    """Error reading or writing persisted score history."""


class SessionNotFoundError(QualityEngineError):
    """No discriminator history exists for the requested session."""


class SessionLimitError(QualityEngineError):
    """The registry is full and cannot create another session."""

"""Application exceptions."""


class AppError(Exception):
    """Base exception for application errors."""


class ModelError(AppError):
    """Base exception for model/database operations."""


class RecordNotFoundError(ModelError):
    """Raised when a record is not found in the store."""

    def __init__(self, model_name: str, record_id: str):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} with id={record_id} not found")


class DatabaseConnectionError(ModelError):
    """Raised when database connection fails."""


class InvalidFilterError(ModelError):
    """Raised when invalid filter is provided."""


class LocalStoreError(AppError):
    """Raised when the local fallback store cannot be read or written."""


class StoreNotInitializedError(AppError):
    """Raised when a record store is requested before startup selected one."""

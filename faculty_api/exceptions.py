"""Application exceptions."""

from typing import Any


class AppError(Exception):
    """Base exception for application errors."""


class ModelError(AppError):
    """Base exception for model/database operations."""


class RecordNotFoundError(ModelError):
    """Raised when a record is not found in the database."""

    def __init__(self, model_name: str, record_id: Any):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} with id={record_id} not found")


class DatabaseConnectionError(ModelError):
    """Raised when a database operation fails."""


class InvalidFilterError(ModelError):
    """Raised when an update names an attribute the model does not have."""


class InvalidQueryParameterError(AppError):
    """Raised when a query string parameter has an unacceptable value."""

    def __init__(self, parameter: str, value: Any, reason: str):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid value {value!r} for '{parameter}': {reason}")

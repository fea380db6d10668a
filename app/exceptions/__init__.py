from app.exceptions.base import AppError
from app.exceptions.domain import (
    DomainError,
    ValidationError,
    NotFoundError
)
from app.exceptions.infrastructure import (
    InfrastructureError,
    DatabaseError
)

__all__ = [
    "AppError",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "InfrastructureError",
    "DatabaseError"
]

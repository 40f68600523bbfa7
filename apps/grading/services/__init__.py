"""Services for green bean grading."""

from .exceptions import (
    GradingServiceError,
    GradingSampleNotFoundError,
    GradingNotFoundError,
    GradingAlreadyExistsError,
)
from .grading_management import (
    get_grading,
    create_grading,
    update_grading,
    delete_grading,
    preview_grade,
)

__all__ = [
    # Exceptions
    'GradingServiceError',
    'GradingSampleNotFoundError',
    'GradingNotFoundError',
    'GradingAlreadyExistsError',
    # Grading Management
    'get_grading',
    'create_grading',
    'update_grading',
    'delete_grading',
    'preview_grade',
]

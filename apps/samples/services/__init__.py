"""Services for samples business logic."""

from .exceptions import (
    SamplesServiceError,
    SampleNotFoundError,
    SampleInUseError,
)
from .sample_management import (
    create_sample,
    get_sample,
    update_sample,
    delete_sample,
)
from .sample_search import (
    search_samples,
    get_sample_origins,
)

__all__ = [
    # Exceptions
    'SamplesServiceError',
    'SampleNotFoundError',
    'SampleInUseError',
    # Sample Management
    'create_sample',
    'get_sample',
    'update_sample',
    'delete_sample',
    # Sample Search
    'search_samples',
    'get_sample_origins',
]

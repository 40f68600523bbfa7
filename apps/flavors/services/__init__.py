"""Services for the flavor descriptor catalog."""

from .exceptions import (
    FlavorsServiceError,
    DescriptorNotFoundError,
    DuplicateDescriptorError,
    ProtectedDescriptorError,
)
from .descriptor_catalog import (
    get_available_descriptors,
    get_descriptor,
    create_descriptor,
    update_descriptor,
    delete_descriptor,
)
from .defaults import (
    DEFAULT_FLAVOR_DESCRIPTORS,
    seed_default_descriptors,
)

__all__ = [
    # Exceptions
    'FlavorsServiceError',
    'DescriptorNotFoundError',
    'DuplicateDescriptorError',
    'ProtectedDescriptorError',
    # Catalog
    'get_available_descriptors',
    'get_descriptor',
    'create_descriptor',
    'update_descriptor',
    'delete_descriptor',
    # Defaults
    'DEFAULT_FLAVOR_DESCRIPTORS',
    'seed_default_descriptors',
]

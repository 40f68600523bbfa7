"""Services for cupping templates."""

from .exceptions import (
    TemplatesServiceError,
    TemplateNotFoundError,
    ProtectedTemplateError,
)
from .template_management import (
    DEFAULT_TEMPLATE_NAME,
    SCA_STANDARD_CATEGORIES,
    list_templates,
    get_template,
    create_template,
    update_template,
    delete_template,
    ensure_default_template,
)

__all__ = [
    # Exceptions
    'TemplatesServiceError',
    'TemplateNotFoundError',
    'ProtectedTemplateError',
    # Template Management
    'DEFAULT_TEMPLATE_NAME',
    'SCA_STANDARD_CATEGORIES',
    'list_templates',
    'get_template',
    'create_template',
    'update_template',
    'delete_template',
    'ensure_default_template',
]

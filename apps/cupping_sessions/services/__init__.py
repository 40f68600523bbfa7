"""Services for cupping sessions."""

from .exceptions import (
    SessionsServiceError,
    SessionNotFoundError,
    InvalidTransitionError,
    SessionLockedError,
    SessionSampleError,
    SessionSampleNotFoundError,
    SessionTemplateError,
    ParticipantError,
)
from .lifecycle import (
    ALLOWED_TRANSITIONS,
    LOCKED_STATUSES,
    can_transition,
    transition_session,
    complete_session_if_fully_scored,
)
from .session_management import (
    blind_code_for,
    list_sessions,
    get_session,
    lock_session,
    create_session,
    update_session,
    delete_session,
    start_session,
    complete_session,
    schedule_session,
    cancel_session,
    archive_session,
)
from .session_samples import (
    add_sample_to_session,
    remove_sample_from_session,
)
from .participants import (
    add_participant,
    ensure_participant,
)

__all__ = [
    # Exceptions
    'SessionsServiceError',
    'SessionNotFoundError',
    'InvalidTransitionError',
    'SessionLockedError',
    'SessionSampleError',
    'SessionSampleNotFoundError',
    'SessionTemplateError',
    'ParticipantError',
    # Lifecycle
    'ALLOWED_TRANSITIONS',
    'LOCKED_STATUSES',
    'can_transition',
    'transition_session',
    'complete_session_if_fully_scored',
    # Session Management
    'blind_code_for',
    'list_sessions',
    'get_session',
    'lock_session',
    'create_session',
    'update_session',
    'delete_session',
    'start_session',
    'complete_session',
    'schedule_session',
    'cancel_session',
    'archive_session',
    # Session Samples
    'add_sample_to_session',
    'remove_sample_from_session',
    # Participants
    'add_participant',
    'ensure_participant',
]

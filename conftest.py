"""Fixtures shared by every app's test suite."""

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Organization, UserRole
from apps.samples.models import Sample
from apps.flavors.models import FlavorDescriptor
from apps.flavors.services import seed_default_descriptors
from apps.cupping_sessions.services import create_session, start_session


def _authenticated_client(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def organization(db):
    """Create and return the primary test organization."""
    return Organization.objects.create(name='Highland Roasters')


@pytest.fixture
def other_organization(db):
    """Create and return an unrelated organization."""
    return Organization.objects.create(name='Lowland Imports')


@pytest.fixture
def admin_user(db, organization):
    """Organization administrator."""
    return User.objects.create_user(
        email='admin@highland.example',
        password='TestPass123!',
        first_name='Ada',
        last_name='Admin',
        organization=organization,
        role=UserRole.ADMIN,
    )


@pytest.fixture
def manager_user(db, organization):
    """Organization manager."""
    return User.objects.create_user(
        email='manager@highland.example',
        password='TestPass123!',
        first_name='Mina',
        last_name='Manager',
        organization=organization,
        role=UserRole.MANAGER,
    )


@pytest.fixture
def cupper_user(db, organization):
    """Organization cupper (evaluator)."""
    return User.objects.create_user(
        email='cupper@highland.example',
        password='TestPass123!',
        first_name='Carl',
        last_name='Cupper',
        organization=organization,
        role=UserRole.CUPPER,
    )


@pytest.fixture
def viewer_user(db, organization):
    """Read-only organization member."""
    return User.objects.create_user(
        email='viewer@highland.example',
        password='TestPass123!',
        first_name='Vera',
        last_name='Viewer',
        organization=organization,
        role=UserRole.VIEWER,
    )


@pytest.fixture
def outsider_user(db, other_organization):
    """Admin of another organization."""
    return User.objects.create_user(
        email='admin@lowland.example',
        password='TestPass123!',
        first_name='Otto',
        last_name='Outsider',
        organization=other_organization,
        role=UserRole.ADMIN,
    )


@pytest.fixture
def admin_client(admin_user):
    """API client authenticated as organization admin."""
    return _authenticated_client(admin_user)


@pytest.fixture
def manager_client(manager_user):
    """API client authenticated as organization manager."""
    return _authenticated_client(manager_user)


@pytest.fixture
def cupper_client(cupper_user):
    """API client authenticated as cupper."""
    return _authenticated_client(cupper_user)


@pytest.fixture
def viewer_client(viewer_user):
    """API client authenticated as viewer."""
    return _authenticated_client(viewer_user)


@pytest.fixture
def outsider_client(outsider_user):
    """API client authenticated as a member of another organization."""
    return _authenticated_client(outsider_user)


@pytest.fixture
def sample(db, organization, cupper_user):
    """Washed Ethiopian sample owned by the primary organization."""
    return Sample.objects.create(
        organization=organization,
        name='Yirgacheffe Konga',
        code='ETH-001',
        origin='Ethiopia',
        region='Yirgacheffe',
        processing_method='WASHED',
        roast_level='LIGHT',
        created_by=cupper_user,
    )


@pytest.fixture
def second_sample(db, organization, cupper_user):
    """Natural Brazilian sample owned by the primary organization."""
    return Sample.objects.create(
        organization=organization,
        name='Fazenda Santa Ines',
        code='BRA-002',
        origin='Brazil',
        processing_method='NATURAL',
        roast_level='MEDIUM',
        created_by=cupper_user,
    )


@pytest.fixture
def foreign_sample(db, other_organization, outsider_user):
    """Sample owned by another organization."""
    return Sample.objects.create(
        organization=other_organization,
        name='Huila Supremo',
        origin='Colombia',
        created_by=outsider_user,
    )


@pytest.fixture
def default_descriptors(db):
    """Seed the global default flavor descriptors."""
    seed_default_descriptors()
    return FlavorDescriptor.objects.filter(is_default=True)


@pytest.fixture
def fruity(default_descriptors):
    return default_descriptors.get(name='Fruity')


@pytest.fixture
def chocolate(default_descriptors):
    return default_descriptors.get(name='Chocolate')


@pytest.fixture
def musty(default_descriptors):
    return default_descriptors.get(name='Musty')


@pytest.fixture
def custom_descriptor(db, organization, manager_user):
    """Organization-specific descriptor."""
    return FlavorDescriptor.objects.create(
        organization=organization,
        created_by=manager_user,
        name='Bergamot',
        category='POSITIVE',
        description='Earl Grey citrus',
    )


@pytest.fixture
def foreign_descriptor(db, other_organization):
    """Descriptor owned by another organization."""
    return FlavorDescriptor.objects.create(
        organization=other_organization,
        name='Lychee',
        category='POSITIVE',
    )


@pytest.fixture
def cupping_session(organization, admin_user, sample, second_sample):
    """DRAFT session with two samples; the admin is head judge."""
    return create_session(
        organization=organization,
        created_by=admin_user,
        name='Morning Calibration',
        location='Lab 1',
        sample_ids=[sample.id, second_sample.id],
    )


@pytest.fixture
def active_session(organization, cupping_session):
    """The same session after it has been started."""
    return start_session(session_id=cupping_session.id, organization=organization)

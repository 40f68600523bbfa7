import pytest
from apps.cupping_templates.models import CuppingTemplate
from apps.cupping_templates.services import ensure_default_template


@pytest.fixture
def default_template(organization, admin_user):
    return ensure_default_template(organization=organization, user=admin_user)


@pytest.fixture
def custom_template(organization, manager_user):
    return CuppingTemplate.objects.create(
        organization=organization,
        created_by=manager_user,
        name='Espresso Panel',
        scoring_system='CUSTOM',
        max_score=50,
        categories=[
            {'name': 'Crema', 'weight': 1, 'description': ''},
            {'name': 'Body', 'weight': 2, 'description': ''},
        ],
    )


@pytest.fixture
def public_foreign_template(other_organization):
    return CuppingTemplate.objects.create(
        organization=other_organization,
        name='Open COE Form',
        scoring_system='COE',
        is_public=True,
        categories=[{'name': 'Flavor', 'weight': 1, 'description': ''}],
    )


@pytest.fixture
def private_foreign_template(other_organization):
    return CuppingTemplate.objects.create(
        organization=other_organization,
        name='Secret Form',
        categories=[{'name': 'Flavor', 'weight': 1, 'description': ''}],
    )

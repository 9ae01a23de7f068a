"""Shared pytest fixtures for the contract template tests."""

from datetime import date

import pytest

from apps.contracts.contract_templates import get_template_by_id
from apps.contracts.placeholders import ContractData


@pytest.fixture
def web_dev_template():
    return get_template_by_id('bc-fixed-web-dev')


@pytest.fixture
def hourly_template():
    return get_template_by_id('bc-hourly-consulting')


@pytest.fixture
def contract_data() -> ContractData:
    """Contract data with a value for every field any catalog template requires."""
    return ContractData(
        business_name='Harbour Coffee Roasters Ltd.',
        business_address='120 Water St, Vancouver, BC',
        talent_name='Jane Doe',
        talent_address='88 Main St, Victoria, BC',
        project_title='Online Ordering Site',
        project_description='Storefront with online ordering and pickup scheduling',
        scope_of_work='Design and build the ordering site and admin tools',
        deliverables='- Ordering site\n- Admin dashboard',
        payment_schedule='Per milestone',
        start_date=date(2025, 1, 1),
        completion_date=date(2025, 2, 26),
        duration='8 weeks',
        total_amount=10000,
        hourly_rate=95,
        estimated_hours=40,
        maximum_hours=60,
    )


@pytest.fixture
def contract_payload():
    """The same contract as submitted by the portal's contract form."""
    return {
        'businessName': 'Harbour Coffee Roasters Ltd.',
        'businessAddress': '120 Water St, Vancouver, BC',
        'talentName': 'Jane Doe',
        'talentAddress': '88 Main St, Victoria, BC',
        'projectTitle': 'Online Ordering Site',
        'projectDescription': 'Storefront with online ordering and pickup scheduling',
        'scopeOfWork': 'Design and build the ordering site and admin tools',
        'deliverables': ['Ordering site', 'Admin dashboard'],
        'paymentSchedule': 'Per milestone',
        'startDate': '2025-01-01',
        'completionDate': '2025-02-26',
        'duration': '8 weeks',
        'totalAmount': '10000',
    }

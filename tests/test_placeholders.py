"""Tests for placeholder substitution and ContractData parsing."""

from datetime import date, datetime

import pytest

from apps.contracts.contract_templates import CONTRACT_TEMPLATES, get_template_by_id
from apps.contracts.placeholders import (
    ContractData,
    find_missing_fields,
    find_unresolved_placeholders,
    format_milestone_schedule,
    format_value,
    render_contract,
)


def test_replaces_every_occurrence():
    body = "${talentName} agrees to $${totalAmount}. ${talentName} is paid $${totalAmount} CAD."
    data = ContractData(talent_name='Jane Doe', total_amount=10000)

    result = render_contract(body, data)

    assert result == "Jane Doe agrees to $10000. Jane Doe is paid $10000 CAD."


@pytest.mark.parametrize("template", CONTRACT_TEMPLATES, ids=lambda t: t.id)
def test_complete_data_leaves_no_placeholders(template, contract_data):
    result = render_contract(template, contract_data)
    assert find_unresolved_placeholders(result) == []
    assert find_missing_fields(template, contract_data) == []


def test_unknown_placeholder_left_verbatim():
    result = render_contract("Signed by ${talentName} for ${clientNickname}", ContractData(talent_name='Jane'))
    assert result == "Signed by Jane for ${clientNickname}"
    assert find_unresolved_placeholders(result) == ['clientNickname']


def test_missing_optional_values_become_empty():
    result = render_contract("Address: ${talentAddress}|", ContractData())
    assert result == "Address: |"


def test_substituted_values_are_not_expanded_again():
    data = ContractData(project_title='${talentName}', talent_name='Jane')
    assert render_contract("${projectTitle}", data) == "${talentName}"


def test_rendering_is_deterministic(web_dev_template, contract_data):
    assert render_contract(web_dev_template, contract_data) == render_contract(web_dev_template, contract_data)


def test_web_dev_contract_content(web_dev_template, contract_data):
    result = render_contract(web_dev_template, contract_data)

    assert "BUSINESS: Harbour Coffee Roasters Ltd." in result
    assert "Total Contract Value: $10000 CAD" in result
    assert "Start Date: January 01, 2025" in result
    assert "Completion Date: February 26, 2025" in result


def test_hourly_aliases_and_defaults(hourly_template, contract_data):
    result = render_contract(hourly_template, contract_data)

    assert "SERVICES:\nDesign and build the ordering site and admin tools" in result
    assert "INVOICING:\nPer milestone" in result
    assert "Invoices submitted weekly" in result
    assert "Hourly Rate: $95 CAD" in result


def test_milestones_placeholder(contract_data):
    template = get_template_by_id('bc-fixed-graphic-design')
    result = render_contract(template, contract_data)

    assert "1. Discovery & Concepts - $3000.00 (30%)" in result
    assert "Due: 10 days from start" in result
    assert "Up to 3 rounds of revisions included." in result


def test_milestone_schedule_text(web_dev_template):
    schedule = format_milestone_schedule(web_dev_template, 10000)

    assert schedule.startswith(
        "1. Project Kickoff & Planning - $2500.00 (25%)\n"
        "Due: 7 days from start\n"
        "Deliverables: Detailed project specification document, "
    )
    assert "4. Final Delivery - $1000.00 (10%)" in schedule


def test_milestone_schedule_empty_without_total(web_dev_template, hourly_template):
    assert format_milestone_schedule(web_dev_template, None) == ''
    assert format_milestone_schedule(hourly_template, 5000) == ''


@pytest.mark.parametrize("value, expected", [
    (None, ''),
    (10000, '10000'),
    (10000.0, '10000'),
    (2500.5, '2500.5'),
    (date(2025, 1, 1), 'January 01, 2025'),
    (datetime(2025, 3, 14, 9, 30), 'March 14, 2025'),
    ('text', 'text'),
])
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_find_missing_fields(web_dev_template):
    data = ContractData(project_title='Site', total_amount=0)
    missing = find_missing_fields(web_dev_template, data)

    assert 'projectTitle' not in missing
    # zero is a value, even if a nonsensical one
    assert 'totalAmount' not in missing
    assert missing == ['projectDescription', 'deliverables', 'startDate', 'completionDate', 'paymentSchedule']


def test_from_dict_parses_form_values(contract_payload):
    data = ContractData.from_dict(contract_payload)

    assert data.talent_name == 'Jane Doe'
    assert data.start_date == date(2025, 1, 1)
    assert data.completion_date == date(2025, 2, 26)
    assert data.total_amount == 10000
    assert data.deliverables == '- Ordering site\n- Admin dashboard'


def test_from_dict_accepts_aliases_and_attribute_names():
    data = ContractData.from_dict({
        'serviceDescription': 'Weekly SEO reviews',
        'invoicingSchedule': 'Bi-weekly',
        'hourly_rate': '87.50',
        'startDate': '2025-04-01T08:00:00.000Z',
        'unknownField': 'ignored',
    })

    assert data.scope_of_work == 'Weekly SEO reviews'
    assert data.payment_schedule == 'Bi-weekly'
    assert data.hourly_rate == 87.5
    assert data.start_date == date(2025, 4, 1)
    assert data.invoicing_frequency == 'weekly'


def test_from_dict_skips_blank_values():
    data = ContractData.from_dict({'totalAmount': '', 'completionDate': None, 'invoicingFrequency': ''})
    assert data.total_amount is None
    assert data.completion_date is None
    assert data.invoicing_frequency == 'weekly'


@pytest.mark.parametrize("payload", [
    {'startDate': '01/02/2025'},
    {'totalAmount': 'ten thousand'},
    {'totalAmount': 'inf'},
    {'hourlyRate': float('inf')},
    {'totalAmount': 'nan'},
    {'startDate': '2025-01-01garbage'},
    {'startDate': '2025-13-01'},
])
def test_from_dict_rejects_bad_values(payload):
    with pytest.raises(ValueError):
        ContractData.from_dict(payload)


def test_from_dict_accepts_iso_timestamps():
    data = ContractData.from_dict({'startDate': '2025-04-01T00:00:00.000Z', 'completionDate': '2025-05-01T09:30:00'})
    assert data.start_date == date(2025, 4, 1)
    assert data.completion_date == date(2025, 5, 1)


def test_from_dict_coerces_scalars_in_text_fields():
    data = ContractData.from_dict({'deliverables': 3, 'projectTitle': 2025, 'duration': 8.5})
    assert data.deliverables == '3'
    assert data.project_title == '2025'
    assert data.duration == '8.5'

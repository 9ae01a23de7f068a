"""Tests for the static contract template catalog."""

import dataclasses

import pytest

from apps.contracts.contract_templates import (
    CONTRACT_TEMPLATES,
    get_template_by_id,
    get_templates_by_jurisdiction,
    get_templates_by_type,
)
from apps.contracts.contract_types import Jurisdiction, PricingType
from apps.contracts.placeholders import PLACEHOLDER_PATTERN, RECOGNIZED_PLACEHOLDERS


@pytest.mark.parametrize("template", CONTRACT_TEMPLATES, ids=lambda t: t.id)
def test_milestone_percentages_sum_to_100(template):
    if template.default_milestones is None:
        pytest.skip("template has no default milestones")
    assert sum(m.percentage for m in template.default_milestones) == 100


@pytest.mark.parametrize("template", CONTRACT_TEMPLATES, ids=lambda t: t.id)
def test_every_body_placeholder_is_recognized(template):
    used = set(PLACEHOLDER_PATTERN.findall(template.template))
    assert used <= RECOGNIZED_PLACEHOLDERS


@pytest.mark.parametrize("template", CONTRACT_TEMPLATES, ids=lambda t: t.id)
def test_declared_fields_are_recognized(template):
    assert set(template.required_fields) <= RECOGNIZED_PLACEHOLDERS
    assert set(template.optional_fields) <= RECOGNIZED_PLACEHOLDERS


def test_template_ids_are_unique():
    ids = [template.id for template in CONTRACT_TEMPLATES]
    assert len(ids) == len(set(ids))


def test_due_offsets_are_non_negative():
    for template in CONTRACT_TEMPLATES:
        for milestone in template.default_milestones or ():
            assert milestone.due_offset is None or milestone.due_offset >= 0


def test_get_template_by_id():
    template = get_template_by_id('bc-fixed-web-dev')
    assert template.name == 'Fixed Price Web Development Contract (BC)'
    assert template.jurisdiction == Jurisdiction.BC
    assert template.type == PricingType.FIXED
    assert len(template.default_milestones) == 4


def test_get_template_by_id_not_found():
    assert get_template_by_id('qc-fixed-nothing') is None


def test_templates_by_jurisdiction_preserve_catalog_order():
    ids = [t.id for t in get_templates_by_jurisdiction(Jurisdiction.BC)]
    assert ids == ['bc-fixed-web-dev', 'bc-hourly-consulting', 'bc-fixed-graphic-design']


def test_templates_by_jurisdiction_accepts_strings():
    assert get_templates_by_jurisdiction('on') == get_templates_by_jurisdiction(Jurisdiction.ON)
    assert [t.id for t in get_templates_by_jurisdiction('AB')] == ['ab-hourly-consulting']


def test_templates_by_jurisdiction_empty_result():
    assert get_templates_by_jurisdiction(Jurisdiction.QC) == []
    assert get_templates_by_jurisdiction('YT') == []


def test_templates_by_type():
    hourly = [t.id for t in get_templates_by_type(PricingType.HOURLY)]
    fixed = [t.id for t in get_templates_by_type('fixed')]

    assert hourly == ['bc-hourly-consulting', 'ab-hourly-consulting']
    assert fixed == ['bc-fixed-web-dev', 'bc-fixed-graphic-design', 'on-fixed-web-dev']
    assert get_templates_by_type('retainer') == []


def test_catalog_is_read_only():
    template = get_template_by_id('bc-fixed-web-dev')
    with pytest.raises(dataclasses.FrozenInstanceError):
        template.name = 'Changed'
    with pytest.raises(dataclasses.FrozenInstanceError):
        template.default_milestones[0].percentage = 50


def test_to_dict_omits_body_unless_requested():
    template = get_template_by_id('bc-hourly-consulting')

    summary = template.to_dict()
    assert 'template' not in summary
    assert summary['default_milestones'] is None
    assert summary['jurisdiction_name'] == 'British Columbia'

    detail = template.to_dict(include_body=True)
    assert detail['template'].startswith('HOURLY CONSULTING AGREEMENT')

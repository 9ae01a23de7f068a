"""
Contract Service - Renders templates and composes contract drafts
"""
import logging
from datetime import date

from django.conf import settings

from apps.contracts.contract_types import ContractStatus, Jurisdiction, PricingType
from apps.contracts.milestones import generate_milestones_from_template
from apps.contracts.placeholders import (
    find_missing_fields,
    find_unresolved_placeholders,
    format_value,
    render_contract,
)
from core.file_utils import build_contract_pdf
from core.helpers import clean_contract_text, markdown_to_html
from core.jurisdiction_rules import get_jurisdiction_rules

logger = logging.getLogger(__name__)


class ContractService:
    """Service for contract rendering and draft operations"""

    def __init__(self, currency=None):
        self.currency = currency or getattr(settings, 'CONTRACT_CURRENCY', 'CAD')

    def render(self, template, contract_data):
        """Render a template and report anything left unfilled"""
        content = clean_contract_text(render_contract(template, contract_data))
        missing_fields = find_missing_fields(template, contract_data)
        unresolved = find_unresolved_placeholders(content)

        if missing_fields:
            logger.warning(f"Template '{template.id}' rendered without required fields: {', '.join(missing_fields)}")
        if unresolved:
            logger.warning(f"Template '{template.id}' left placeholders unresolved: {', '.join(unresolved)}")

        return {
            'content': content,
            'html': markdown_to_html(content),
            'missing_fields': missing_fields,
            'unresolved_placeholders': unresolved,
        }

    def build_milestones(self, template, total_value, start_date, contract_id='', absorb_remainder=True):
        """Milestones for a draft; drafts absorb the rounding remainder in the last milestone"""
        if template.type != PricingType.FIXED or total_value is None:
            return []
        return generate_milestones_from_template(
            template, total_value, start_date or date.today(),
            contract_id=contract_id, absorb_remainder=absorb_remainder
        )

    def build_contract_draft(self, template, contract_data, contract_id=''):
        """Compose a draft contract record ready to be posted to the contracts API"""
        rendered = self.render(template, contract_data)
        rules = get_jurisdiction_rules(template.jurisdiction)
        milestones = self.build_milestones(
            template, contract_data.total_amount, contract_data.start_date, contract_id=contract_id
        )

        if template.type == PricingType.HOURLY:
            payment_terms = {
                'type': 'hourly',
                'hourlyRate': contract_data.hourly_rate,
                'estimatedHours': contract_data.estimated_hours,
                'maxHours': contract_data.maximum_hours,
                'invoicingFrequency': contract_data.invoicing_frequency,
            }
        else:
            payment_terms = {
                'type': 'milestone' if milestones else 'completion',
                'schedule': [
                    {'milestone': m.name, 'amount': m.value, 'dueDate': m.due_date.isoformat()}
                    for m in milestones
                ],
            }

        draft = {
            'id': contract_id,
            'templateId': template.id,
            'status': ContractStatus.DRAFT.value,
            'type': template.type.value,
            'title': contract_data.project_title or template.name,
            'description': contract_data.project_description,
            'scope': contract_data.scope_of_work,
            'deliverables': [
                line.strip().removeprefix('- ').strip()
                for line in contract_data.deliverables.split('\n') if line.strip()
            ],
            'totalValue': contract_data.total_amount,
            'currency': self.currency,
            'paymentTerms': payment_terms,
            'startDate': contract_data.start_date.isoformat() if contract_data.start_date else None,
            'endDate': contract_data.completion_date.isoformat() if contract_data.completion_date else None,
            'duration': contract_data.duration,
            'milestones': [milestone.to_dict() for milestone in milestones],
            'jurisdiction': template.jurisdiction.value,
            'jurisdictionName': Jurisdiction.get_display_name(template.jurisdiction),
            'governingLaw': rules['governing_law'],
            'disputeResolution': rules['dispute_resolution'],
            'taxNote': rules['tax_note'],
            'legalWarning': rules['legal_warning'],
            'content': rendered['content'],
            'missingFields': rendered['missing_fields'],
            'unresolvedPlaceholders': rendered['unresolved_placeholders'],
        }

        logger.info(
            f"Built {template.type.value} draft from '{template.id}' "
            f"({len(milestones)} milestones, total {format_value(contract_data.total_amount) or 'n/a'})"
        )
        return draft

    def export_pdf(self, content, title=None):
        """Export contract text as PDF bytes"""
        pdf_bytes = build_contract_pdf(clean_contract_text(content), title=title)
        logger.info(f"Exported contract PDF ({len(pdf_bytes)} bytes)")
        return pdf_bytes

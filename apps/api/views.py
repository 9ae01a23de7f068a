"""
API Views - REST API endpoints for contract templates, milestones and drafts
"""
import json
import logging

from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.contracts.contract_templates import (
    CONTRACT_TEMPLATES,
    get_template_by_id,
    get_templates_by_jurisdiction,
    get_templates_by_type,
)
from apps.contracts.contract_types import MilestoneStatus, PricingType
from apps.contracts.milestones import generate_milestones_from_template, milestone_total
from apps.contracts.placeholders import ContractData, parse_date, parse_number
from core.jurisdiction_rules import get_available_jurisdictions
from core.services.contract_service import ContractService

logger = logging.getLogger(__name__)

contract_service = ContractService()


def _json_body(request):
    data = json.loads(request.body)
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')
    return data


def _template_not_found(template_id):
    return JsonResponse({'status': 'error', 'message': f"Template '{template_id}' not found"}, status=404)


def _flag(value):
    """JSON true, or the strings "true"/"1" sent by form-style clients"""
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1')
    return value is True


@require_http_methods(["GET"])
def contract_templates(request):
    """List catalog templates, optionally filtered by jurisdiction and type"""
    templates = list(CONTRACT_TEMPLATES)

    jurisdiction = request.GET.get('jurisdiction')
    if jurisdiction:
        matching = get_templates_by_jurisdiction(jurisdiction)
        templates = [template for template in templates if template in matching]

    pricing_type = request.GET.get('type')
    if pricing_type:
        matching = get_templates_by_type(pricing_type)
        templates = [template for template in templates if template in matching]

    return JsonResponse({
        'status': 'success',
        'count': len(templates),
        'templates': [template.to_dict() for template in templates],
        'pricing_types': PricingType.get_all_types(),
    })


@require_http_methods(["GET"])
def contract_template_detail(request, template_id):
    """Get a single template including its body"""
    template = get_template_by_id(template_id)
    if template is None:
        return _template_not_found(template_id)

    return JsonResponse({
        'status': 'success',
        'template': template.to_dict(include_body=True),
    })


@csrf_exempt
@require_http_methods(["POST"])
def render_template(request, template_id):
    """Fill a template with contract data"""
    template = get_template_by_id(template_id)
    if template is None:
        return _template_not_found(template_id)

    try:
        data = _json_body(request)
        contract_data = ContractData.from_dict(data)
        rendered = contract_service.render(template, contract_data)

        return JsonResponse({
            'status': 'success',
            'template_id': template.id,
            **rendered,
        })

    except json.JSONDecodeError:
        return JsonResponse({'status': 'error', 'message': 'Invalid JSON'}, status=400)
    except ValueError as e:
        return JsonResponse({'status': 'error', 'message': str(e)}, status=400)
    except Exception as e:
        logger.exception(f"Error rendering template '{template_id}'")
        return JsonResponse({'status': 'error', 'message': str(e)}, status=500)


@csrf_exempt
@require_http_methods(["POST"])
def generate_milestones(request, template_id):
    """Materialize a template's default milestones for a total value and start date"""
    template = get_template_by_id(template_id)
    if template is None:
        return _template_not_found(template_id)

    try:
        data = _json_body(request)

        if data.get('totalValue') in (None, ''):
            return JsonResponse({'status': 'error', 'message': 'totalValue is required'}, status=400)
        if not data.get('startDate'):
            return JsonResponse({'status': 'error', 'message': 'startDate is required'}, status=400)

        total_value = parse_number(data['totalValue'])
        start_date = parse_date(data['startDate'])

        milestones = generate_milestones_from_template(
            template, total_value, start_date,
            contract_id=data.get('contractId', ''),
            absorb_remainder=_flag(data.get('absorbRemainder'))
        )

        return JsonResponse({
            'status': 'success',
            'template_id': template.id,
            'total_value': total_value,
            'milestones_total': milestone_total(milestones),
            'milestones': [milestone.to_dict() for milestone in milestones],
        })

    except json.JSONDecodeError:
        return JsonResponse({'status': 'error', 'message': 'Invalid JSON'}, status=400)
    except ValueError as e:
        return JsonResponse({'status': 'error', 'message': str(e)}, status=400)
    except Exception as e:
        logger.exception(f"Error generating milestones for '{template_id}'")
        return JsonResponse({'status': 'error', 'message': str(e)}, status=500)


@csrf_exempt
@require_http_methods(["POST"])
def create_contract_draft(request, template_id):
    """Compose a full contract draft (content, milestones, legal terms)"""
    template = get_template_by_id(template_id)
    if template is None:
        return _template_not_found(template_id)

    try:
        data = _json_body(request)
        contract_data = ContractData.from_dict(data)
        draft = contract_service.build_contract_draft(
            template, contract_data, contract_id=data.get('contractId', '')
        )

        return JsonResponse({
            'status': 'success',
            'contract': draft,
        })

    except json.JSONDecodeError:
        return JsonResponse({'status': 'error', 'message': 'Invalid JSON'}, status=400)
    except ValueError as e:
        return JsonResponse({'status': 'error', 'message': str(e)}, status=400)
    except Exception as e:
        logger.exception(f"Error building draft from '{template_id}'")
        return JsonResponse({'status': 'error', 'message': str(e)}, status=500)


@require_http_methods(["GET"])
def jurisdictions(request):
    """Get available jurisdictions"""
    return JsonResponse({
        'status': 'success',
        'default': settings.CONTRACT_DEFAULT_JURISDICTION,
        'jurisdictions': get_available_jurisdictions(),
    })


@require_http_methods(["GET"])
def milestone_statuses(request):
    """Describe milestone states and which states may follow each"""
    statuses = []
    for status in MilestoneStatus:
        statuses.append({
            'value': status.value,
            'label': MilestoneStatus.get_display_name(status),
            'next': [next_status.value for next_status in MilestoneStatus.get_next_states(status)],
            'terminal': MilestoneStatus.is_terminal(status),
        })

    return JsonResponse({
        'status': 'success',
        'statuses': statuses,
    })


@require_http_methods(["GET"])
def health_check(request):
    """API health check"""
    return JsonResponse({
        'status': 'healthy',
        'service': 'Local Talent Contracts API',
        'version': '1.0.0',
        'templates': len(CONTRACT_TEMPLATES),
    })

"""
Contract Views - Django views for contract document downloads
"""
import logging

from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.contracts.contract_templates import get_template_by_id
from apps.contracts.placeholders import ContractData
from core.file_utils import get_secure_filename
from core.helpers import clean_contract_text, markdown_to_html, render_html_document
from core.services.contract_service import ContractService

logger = logging.getLogger(__name__)

contract_service = ContractService()


def _contract_from_request(request):
    """
    Contract text and title from a download form.

    The form either posts the previewed `contract_text` or a `template_id`
    plus the contract fields, in which case the template is rendered here.
    """
    title = request.POST.get('title', '').strip() or 'contract'
    contract_text = request.POST.get('contract_text', '')

    if not contract_text and request.POST.get('template_id'):
        template = get_template_by_id(request.POST['template_id'])
        if template is None:
            return None, title
        contract_data = ContractData.from_dict(request.POST.dict())
        contract_text = contract_service.render(template, contract_data)['content']
        if title == 'contract':
            title = contract_data.project_title or template.name

    return clean_contract_text(contract_text), title


def _template_not_found(request):
    template_id = request.POST.get('template_id')
    return JsonResponse({'status': 'error', 'message': f"Template '{template_id}' not found"}, status=404)


def _attachment(content, content_type, filename):
    response = HttpResponse(content, content_type=content_type)
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


@csrf_exempt
@require_http_methods(["POST"])
def download_text(request):
    """Download contract as a plain text file"""
    try:
        contract_text, title = _contract_from_request(request)
        if contract_text is None:
            return _template_not_found(request)
        if not contract_text:
            return JsonResponse({'status': 'error', 'message': 'No contract content'}, status=400)

        return _attachment(contract_text, 'text/plain; charset=utf-8', get_secure_filename(f"{title}.txt"))

    except ValueError as e:
        return JsonResponse({'status': 'error', 'message': str(e)}, status=400)
    except Exception as e:
        logger.exception("Error preparing text download")
        return JsonResponse({'status': 'error', 'message': str(e)}, status=500)


@csrf_exempt
@require_http_methods(["POST"])
def download_html(request):
    """Download contract as HTML file"""
    try:
        contract_text, title = _contract_from_request(request)
        if contract_text is None:
            return _template_not_found(request)
        if not contract_text:
            return JsonResponse({'status': 'error', 'message': 'No contract content'}, status=400)

        full_html = render_html_document(title, markdown_to_html(contract_text))
        return _attachment(full_html, 'text/html; charset=utf-8', get_secure_filename(f"{title}.html"))

    except ValueError as e:
        return JsonResponse({'status': 'error', 'message': str(e)}, status=400)
    except Exception as e:
        logger.exception("Error preparing HTML download")
        return JsonResponse({'status': 'error', 'message': str(e)}, status=500)


@csrf_exempt
@require_http_methods(["POST"])
def download_pdf(request):
    """Download contract as PDF file"""
    try:
        contract_text, title = _contract_from_request(request)
        if contract_text is None:
            return _template_not_found(request)
        if not contract_text:
            return JsonResponse({'status': 'error', 'message': 'No contract content'}, status=400)

        pdf_bytes = contract_service.export_pdf(contract_text, title=title)
        return _attachment(pdf_bytes, 'application/pdf', get_secure_filename(f"{title}.pdf"))

    except ValueError as e:
        return JsonResponse({'status': 'error', 'message': str(e)}, status=400)
    except Exception as e:
        logger.exception("Error preparing PDF download")
        return JsonResponse({'status': 'error', 'message': str(e)}, status=500)

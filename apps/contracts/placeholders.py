"""
Placeholder substitution - fills ${name} tokens in a template body from ContractData
"""
import math
import re
from dataclasses import dataclass, fields
from datetime import date, datetime
from decimal import Decimal

PLACEHOLDER_PATTERN = re.compile(r'\$\{(\w+)\}')

DATE_DISPLAY_FORMAT = '%B %d, %Y'

DEFAULT_INVOICING_FREQUENCY = 'weekly'
DEFAULT_REVISION_POLICY = 'Up to 3 rounds of revisions included'

# Placeholder name -> ContractData attribute
PLACEHOLDER_FIELDS = {
    'businessName': 'business_name',
    'businessAddress': 'business_address',
    'talentName': 'talent_name',
    'talentAddress': 'talent_address',
    'projectTitle': 'project_title',
    'projectDescription': 'project_description',
    'scopeOfWork': 'scope_of_work',
    'deliverables': 'deliverables',
    'paymentSchedule': 'payment_schedule',
    'startDate': 'start_date',
    'completionDate': 'completion_date',
    'duration': 'duration',
    'totalAmount': 'total_amount',
    'hourlyRate': 'hourly_rate',
    'estimatedHours': 'estimated_hours',
    'maximumHours': 'maximum_hours',
    'minimumHours': 'minimum_hours',
    'invoicingFrequency': 'invoicing_frequency',
    'revisionPolicy': 'revision_policy',
    'additionalTerms': 'additional_terms',
    'cancellationPolicy': 'cancellation_policy',
    'intellectualPropertyRights': 'intellectual_property_rights',
    'expensePolicy': 'expense_policy',
    'terminationNotice': 'termination_notice',
}

# Placeholders that reuse another placeholder's value
PLACEHOLDER_ALIASES = {
    'serviceDescription': 'scopeOfWork',
    'designScope': 'scopeOfWork',
    'invoicingSchedule': 'paymentSchedule',
}

DATE_FIELDS = ('start_date', 'completion_date')
NUMBER_FIELDS = ('total_amount', 'hourly_rate', 'estimated_hours', 'maximum_hours', 'minimum_hours')

RECOGNIZED_PLACEHOLDERS = frozenset(PLACEHOLDER_FIELDS) | frozenset(PLACEHOLDER_ALIASES) | {'milestones'}


@dataclass(frozen=True)
class ContractData:
    """Every value a contract template can ask for"""
    business_name: str = ''
    business_address: str = ''
    talent_name: str = ''
    talent_address: str = ''
    project_title: str = ''
    project_description: str = ''
    scope_of_work: str = ''
    deliverables: str = ''
    payment_schedule: str = ''
    start_date: date = None
    completion_date: date = None
    duration: str = ''
    total_amount: float = None
    hourly_rate: float = None
    estimated_hours: float = None
    maximum_hours: float = None
    minimum_hours: float = None
    invoicing_frequency: str = DEFAULT_INVOICING_FREQUENCY
    revision_policy: str = DEFAULT_REVISION_POLICY
    additional_terms: str = ''
    cancellation_policy: str = ''
    intellectual_property_rights: str = ''
    expense_policy: str = ''
    termination_notice: str = ''

    @classmethod
    def from_dict(cls, data):
        """
        Build ContractData from a form or JSON mapping.

        Keys may be the camelCase placeholder names used by the portal forms
        or the attribute names. Raises ValueError for unparseable dates or
        numbers.
        """
        attribute_names = {f.name for f in fields(cls)}
        values = {}

        for key, value in data.items():
            key = PLACEHOLDER_ALIASES.get(key, key)
            attribute = PLACEHOLDER_FIELDS.get(key, key)
            if attribute not in attribute_names or attribute in values:
                continue
            if value is None or value == '':
                continue
            if attribute in DATE_FIELDS:
                value = parse_date(value)
            elif attribute in NUMBER_FIELDS:
                value = parse_number(value)
            elif isinstance(value, (list, tuple)):
                value = '\n'.join(f"- {item}" for item in value)
            else:
                value = str(value)
            values[attribute] = value

        return cls(**values)


def parse_date(value):
    """Parse YYYY-MM-DD (or an ISO timestamp) into a date"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    try:
        if 'T' in text:
            # Browsers send a trailing Z for UTC
            return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
        return date.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")


def parse_number(value):
    """Parse a form amount into an int when integral, else a float"""
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        number = value
    else:
        try:
            number = float(str(value).replace(',', '').replace('$', '').strip())
        except ValueError:
            raise ValueError(f"Invalid number '{value}'")
    if not math.isfinite(number):
        raise ValueError(f"Invalid number '{value}'")
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def format_value(value):
    """Coerce a placeholder value to the text that goes into the contract"""
    if value is None:
        return ''
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.strftime(DATE_DISPLAY_FORMAT)
    if isinstance(value, bool):
        return 'Yes' if value else 'No'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_milestone_schedule(template, total_value):
    """Numbered milestone schedule with amounts, used for the ${milestones} placeholder"""
    if not template.default_milestones or not total_value:
        return ''

    entries = []
    for index, milestone in enumerate(template.default_milestones, start=1):
        amount = float(total_value) * milestone.percentage / 100
        entries.append(
            f"{index}. {milestone.name} - ${amount:.2f} ({milestone.percentage}%)\n"
            f"Due: {milestone.due_offset or 0} days from start\n"
            f"Deliverables: {', '.join(milestone.deliverables)}"
        )
    return '\n\n'.join(entries)


def build_replacements(data, template=None):
    """Map every recognized placeholder name to its text value"""
    replacements = {
        name: format_value(getattr(data, attribute))
        for name, attribute in PLACEHOLDER_FIELDS.items()
    }
    for alias, source in PLACEHOLDER_ALIASES.items():
        replacements[alias] = replacements[source]

    replacements['milestones'] = ''
    if template is not None and data.total_amount:
        replacements['milestones'] = format_milestone_schedule(template, data.total_amount)
    return replacements


def render_contract(template, data):
    """
    Substitute ContractData into a template body.

    `template` is a ContractTemplate or a raw body string. Every occurrence of
    a recognized placeholder is replaced; unrecognized placeholders stay in the
    output verbatim so they can be reported by find_unresolved_placeholders.
    """
    if isinstance(template, str):
        body, source = template, None
    else:
        body, source = template.template, template

    replacements = build_replacements(data, source)
    return PLACEHOLDER_PATTERN.sub(
        lambda match: replacements.get(match.group(1), match.group(0)),
        body
    )


def find_unresolved_placeholders(text):
    """Placeholder names still present in rendered text, in order of first appearance"""
    names = []
    for name in PLACEHOLDER_PATTERN.findall(text):
        if name not in names:
            names.append(name)
    return names


def find_missing_fields(template, data):
    """Required fields of the template that have no value in data"""
    replacements = build_replacements(data, template)
    return [
        name for name in template.required_fields
        if not replacements.get(name)
    ]

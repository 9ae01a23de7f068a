"""
Contract Templates - Static catalog of provincial contract templates
"""
from dataclasses import dataclass

from apps.contracts.contract_types import Jurisdiction, PricingType


@dataclass(frozen=True)
class MilestoneTemplate:
    """A share of the contract value paid out on a relative due date"""
    id: str
    name: str
    description: str
    percentage: int  # % of total contract value
    deliverables: tuple = ()
    due_offset: int = None  # days from start date

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'percentage': self.percentage,
            'deliverables': list(self.deliverables),
            'dueOffset': self.due_offset,
        }


@dataclass(frozen=True)
class ContractTemplate:
    """A contract body with ${name} placeholders and its default payment schedule"""
    id: str
    name: str
    jurisdiction: Jurisdiction
    type: PricingType
    description: str
    template: str
    required_fields: tuple = ()
    optional_fields: tuple = ()
    default_milestones: tuple = None

    def to_dict(self, include_body=False):
        data = {
            'id': self.id,
            'name': self.name,
            'jurisdiction': self.jurisdiction.value,
            'jurisdiction_name': Jurisdiction.get_display_name(self.jurisdiction),
            'type': self.type.value,
            'description': self.description,
            'required_fields': list(self.required_fields),
            'optional_fields': list(self.optional_fields),
            'default_milestones': (
                [milestone.to_dict() for milestone in self.default_milestones]
                if self.default_milestones is not None else None
            ),
        }
        if include_body:
            data['template'] = self.template
        return data


BC_FIXED_WEB_DEV_BODY = """INDEPENDENT CONTRACTOR AGREEMENT
(Fixed Price Web Development - British Columbia)

This Agreement is made between:

BUSINESS: ${businessName}
Address: ${businessAddress}
("Client")

CONTRACTOR: ${talentName}
Address: ${talentAddress}
("Contractor")

PROJECT DETAILS:
Title: ${projectTitle}
Description: ${projectDescription}

SCOPE OF WORK:
${scopeOfWork}

DELIVERABLES:
${deliverables}

COMPENSATION:
Total Contract Value: $${totalAmount} CAD
Payment Schedule: ${paymentSchedule}

TIMELINE:
Start Date: ${startDate}
Completion Date: ${completionDate}
Duration: ${duration}

TERMS AND CONDITIONS:

1. INDEPENDENT CONTRACTOR RELATIONSHIP
The Contractor is an independent contractor and not an employee of the Client. The Contractor shall be responsible for all taxes, including but not limited to income tax, CPP, and EI contributions.

2. INTELLECTUAL PROPERTY
Upon full payment, all work product created under this Agreement shall be owned by the Client. The Contractor retains the right to use general knowledge, skills, and experience gained during the project.

3. CONFIDENTIALITY
The Contractor agrees to maintain confidentiality of all Client information and not to disclose any confidential information to third parties.

4. PAYMENT TERMS
- Payments shall be made according to the milestone schedule
- Invoices are due within 30 days of receipt
- Late payments may incur interest charges of 1.5% per month

5. TERMINATION
Either party may terminate this Agreement with 14 days written notice. Upon termination, the Contractor shall be paid for work completed to date.

6. DISPUTE RESOLUTION
Any disputes shall be resolved through mediation in British Columbia. If mediation fails, disputes shall be resolved through binding arbitration under the laws of British Columbia.

7. GOVERNING LAW
This Agreement shall be governed by the laws of British Columbia and Canada.

8. LIMITATION OF LIABILITY
The Contractor's liability shall not exceed the total contract value.

ADDITIONAL TERMS:
${additionalTerms}

SIGNATURES:
Client: _________________________ Date: _________
Contractor: _________________________ Date: _________

This contract is governed by the laws of British Columbia, Canada.
"""

BC_HOURLY_CONSULTING_BODY = """HOURLY CONSULTING AGREEMENT
(British Columbia)

This Agreement is made between:

CLIENT: ${businessName}
Address: ${businessAddress}

CONSULTANT: ${talentName}
Address: ${talentAddress}

SERVICES:
${serviceDescription}

COMPENSATION:
Hourly Rate: $${hourlyRate} CAD
Estimated Hours: ${estimatedHours}
Maximum Hours: ${maximumHours}

INVOICING:
${invoicingSchedule}

TERMS:
- Time tracking required for all billable hours
- Invoices submitted ${invoicingFrequency}
- Payment due within 30 days
- Expenses require pre-approval

This contract is governed by the laws of British Columbia, Canada.

SIGNATURES:
Client: _________________________ Date: _________
Consultant: _________________________ Date: _________
"""

BC_FIXED_GRAPHIC_DESIGN_BODY = """GRAPHIC DESIGN SERVICES AGREEMENT
(Fixed Price - British Columbia)

This Agreement is made between:

CLIENT: ${businessName}
Address: ${businessAddress}

DESIGNER: ${talentName}
Address: ${talentAddress}

PROJECT: ${projectTitle}
${projectDescription}

DESIGN SCOPE:
${designScope}

DELIVERABLES:
${deliverables}

REVISIONS:
${revisionPolicy}. Additional revision rounds are billed separately at a rate agreed in writing.

COMPENSATION:
Total Contract Value: $${totalAmount} CAD

MILESTONE SCHEDULE:
${milestones}

TIMELINE:
Start Date: ${startDate}
Completion Date: ${completionDate}

TERMS AND CONDITIONS:

1. OWNERSHIP OF FINAL ARTWORK
Upon full payment, the Client owns the final approved artwork. Preliminary concepts, sketches, and rejected designs remain the property of the Designer.

2. PORTFOLIO USE
The Designer may display the final work in a professional portfolio unless the Client requests otherwise in writing.

3. TERMINATION
Either party may terminate this Agreement with 14 days written notice. The Designer shall be paid for all milestones approved before termination.

4. GOVERNING LAW
This Agreement shall be governed by the laws of British Columbia and Canada.

SIGNATURES:
Client: _________________________ Date: _________
Designer: _________________________ Date: _________
"""

ON_FIXED_WEB_DEV_BODY = """INDEPENDENT CONTRACTOR AGREEMENT
(Fixed Price Web Development - Ontario)

This Agreement is made between:

BUSINESS: ${businessName}
Address: ${businessAddress}
("Client")

CONTRACTOR: ${talentName}
Address: ${talentAddress}
("Contractor")

PROJECT DETAILS:
Title: ${projectTitle}
Description: ${projectDescription}

SCOPE OF WORK:
${scopeOfWork}

DELIVERABLES:
${deliverables}

COMPENSATION:
Total Contract Value: $${totalAmount} CAD (HST extra where applicable)
Payment Schedule: ${paymentSchedule}

TIMELINE:
Start Date: ${startDate}
Completion Date: ${completionDate}
Duration: ${duration}

TERMS AND CONDITIONS:

1. INDEPENDENT CONTRACTOR RELATIONSHIP
The Contractor is an independent contractor and not an employee of the Client within the meaning of the Employment Standards Act, 2000 (Ontario). The Contractor is responsible for its own income tax, CPP contributions, and HST remittances.

2. INTELLECTUAL PROPERTY
Upon full payment, all work product created under this Agreement is assigned to the Client. The Contractor waives moral rights in the work product to the extent permitted by law.

3. CONFIDENTIALITY
The Contractor agrees to maintain confidentiality of all Client information and not to disclose any confidential information to third parties.

4. PAYMENT TERMS
- Payments shall be made according to the milestone schedule
- Invoices are due within 30 days of receipt

5. TERMINATION
Either party may terminate this Agreement with 14 days written notice. Upon termination, the Contractor shall be paid for work completed to date.

6. DISPUTE RESOLUTION
Any disputes shall first be referred to mediation in Ontario and, failing resolution, to binding arbitration under the Arbitration Act, 1991 (Ontario).

7. GOVERNING LAW
This Agreement shall be governed by the laws of the Province of Ontario and the federal laws of Canada applicable therein.

ADDITIONAL TERMS:
${additionalTerms}

SIGNATURES:
Client: _________________________ Date: _________
Contractor: _________________________ Date: _________
"""

AB_HOURLY_CONSULTING_BODY = """HOURLY CONSULTING AGREEMENT
(Alberta)

This Agreement is made between:

CLIENT: ${businessName}
Address: ${businessAddress}

CONSULTANT: ${talentName}
Address: ${talentAddress}

SERVICES:
${serviceDescription}

COMPENSATION:
Hourly Rate: $${hourlyRate} CAD plus GST
Estimated Hours: ${estimatedHours}
Maximum Hours: ${maximumHours}

INVOICING:
${invoicingSchedule}

TERMS:
- Time tracking required for all billable hours
- Invoices submitted ${invoicingFrequency}
- Payment due within 30 days
- Hours beyond the maximum require written approval from the Client

This contract is governed by the laws of the Province of Alberta and the federal laws of Canada applicable therein.

SIGNATURES:
Client: _________________________ Date: _________
Consultant: _________________________ Date: _________
"""

WEB_DEV_MILESTONES = (
    MilestoneTemplate(
        id='milestone-1',
        name='Project Kickoff & Planning',
        description='Initial project setup, requirements finalization, and project plan approval',
        percentage=25,
        deliverables=(
            'Detailed project specification document',
            'Technical architecture plan',
            'Project timeline and milestones',
            'Development environment setup',
        ),
        due_offset=7,
    ),
    MilestoneTemplate(
        id='milestone-2',
        name='Development Phase 1',
        description='Core functionality development and initial implementation',
        percentage=40,
        deliverables=(
            'Core application structure',
            'Database design and implementation',
            'Basic user interface',
            'Initial testing results',
        ),
        due_offset=28,
    ),
    MilestoneTemplate(
        id='milestone-3',
        name='Development Phase 2',
        description='Feature completion and integration testing',
        percentage=25,
        deliverables=(
            'Complete feature implementation',
            'Integration testing',
            'Performance optimization',
            'Security implementation',
        ),
        due_offset=49,
    ),
    MilestoneTemplate(
        id='milestone-4',
        name='Final Delivery',
        description='Final testing, deployment, and project handover',
        percentage=10,
        deliverables=(
            'Final testing and bug fixes',
            'Production deployment',
            'Documentation and training',
            'Project handover and support setup',
        ),
        due_offset=56,
    ),
)

GRAPHIC_DESIGN_MILESTONES = (
    MilestoneTemplate(
        id='milestone-1',
        name='Discovery & Concepts',
        description='Creative brief sign-off and initial concept presentation',
        percentage=30,
        deliverables=(
            'Approved creative brief',
            'Three initial design concepts',
        ),
        due_offset=10,
    ),
    MilestoneTemplate(
        id='milestone-2',
        name='Design Refinement',
        description='Revisions on the selected concept',
        percentage=40,
        deliverables=(
            'Refined design based on feedback',
            'Colour palette and typography guide',
        ),
        due_offset=24,
    ),
    MilestoneTemplate(
        id='milestone-3',
        name='Final Artwork',
        description='Production-ready files and handover',
        percentage=30,
        deliverables=(
            'Final artwork in all agreed formats',
            'Source files',
        ),
    ),
)

PROJECT_FIELDS = (
    'projectTitle',
    'projectDescription',
    'deliverables',
    'totalAmount',
    'startDate',
    'completionDate',
    'paymentSchedule',
)

HOURLY_FIELDS = (
    'serviceDescription',
    'hourlyRate',
    'estimatedHours',
    'startDate',
    'invoicingSchedule',
)

CONTRACT_TEMPLATES = (
    ContractTemplate(
        id='bc-fixed-web-dev',
        name='Fixed Price Web Development Contract (BC)',
        jurisdiction=Jurisdiction.BC,
        type=PricingType.FIXED,
        description='Standard fixed-price contract for web development projects in British Columbia',
        template=BC_FIXED_WEB_DEV_BODY,
        required_fields=PROJECT_FIELDS,
        optional_fields=(
            'additionalTerms',
            'cancellationPolicy',
            'intellectualPropertyRights',
        ),
        default_milestones=WEB_DEV_MILESTONES,
    ),
    ContractTemplate(
        id='bc-hourly-consulting',
        name='Hourly Consulting Contract (BC)',
        jurisdiction=Jurisdiction.BC,
        type=PricingType.HOURLY,
        description='Hourly rate contract for consulting and ongoing services in British Columbia',
        template=BC_HOURLY_CONSULTING_BODY,
        required_fields=HOURLY_FIELDS,
        optional_fields=(
            'maximumHours',
            'minimumHours',
            'expensePolicy',
            'terminationNotice',
        ),
    ),
    ContractTemplate(
        id='bc-fixed-graphic-design',
        name='Fixed Price Graphic Design Contract (BC)',
        jurisdiction=Jurisdiction.BC,
        type=PricingType.FIXED,
        description='Fixed-price design engagement with concept, refinement and final artwork milestones',
        template=BC_FIXED_GRAPHIC_DESIGN_BODY,
        required_fields=(
            'projectTitle',
            'designScope',
            'deliverables',
            'totalAmount',
            'startDate',
            'completionDate',
        ),
        optional_fields=(
            'projectDescription',
            'revisionPolicy',
        ),
        default_milestones=GRAPHIC_DESIGN_MILESTONES,
    ),
    ContractTemplate(
        id='on-fixed-web-dev',
        name='Fixed Price Web Development Contract (ON)',
        jurisdiction=Jurisdiction.ON,
        type=PricingType.FIXED,
        description='Fixed-price web development contract under Ontario law, HST exclusive',
        template=ON_FIXED_WEB_DEV_BODY,
        required_fields=PROJECT_FIELDS,
        optional_fields=('additionalTerms',),
        default_milestones=WEB_DEV_MILESTONES,
    ),
    ContractTemplate(
        id='ab-hourly-consulting',
        name='Hourly Consulting Contract (AB)',
        jurisdiction=Jurisdiction.AB,
        type=PricingType.HOURLY,
        description='Hourly rate consulting contract for Alberta clients, GST exclusive',
        template=AB_HOURLY_CONSULTING_BODY,
        required_fields=HOURLY_FIELDS,
        optional_fields=('maximumHours',),
    ),
)


def get_template_by_id(template_id):
    """Get a template by id, or None when the catalog has no such template"""
    for template in CONTRACT_TEMPLATES:
        if template.id == template_id:
            return template
    return None


def get_templates_by_jurisdiction(jurisdiction):
    """Get all templates for a province, in catalog order"""
    jurisdiction = _coerce(Jurisdiction, jurisdiction)
    return [template for template in CONTRACT_TEMPLATES if template.jurisdiction == jurisdiction]


def get_templates_by_type(pricing_type):
    """Get all templates with the given pricing type, in catalog order"""
    pricing_type = _coerce(PricingType, pricing_type)
    return [template for template in CONTRACT_TEMPLATES if template.type == pricing_type]


def _coerce(enum_cls, value):
    # Unknown values match nothing rather than raising
    if isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if member.value.lower() == str(value).strip().lower():
            return member
    return None

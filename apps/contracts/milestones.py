"""
Milestone materialization - turns percentage/offset templates into dated payment milestones
"""
import time
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_FLOOR

from apps.contracts.contract_types import MilestoneStatus


@dataclass
class Milestone:
    """A concrete milestone of a contract; its status is driven by the contracts backend"""
    id: str = field(compare=False)
    contract_id: str
    name: str
    description: str
    deliverables: list
    value: int
    due_date: date
    status: MilestoneStatus = MilestoneStatus.PENDING
    submitted_at: datetime = None
    approved_at: datetime = None
    paid_at: datetime = None
    notes: str = None
    attachments: list = field(default_factory=list)

    def to_dict(self):
        return {
            'id': self.id,
            'contractId': self.contract_id,
            'name': self.name,
            'description': self.description,
            'deliverables': list(self.deliverables),
            'value': self.value,
            'dueDate': self.due_date.isoformat(),
            'status': self.status.value,
            'submittedAt': self.submitted_at.isoformat() if self.submitted_at else None,
            'approvedAt': self.approved_at.isoformat() if self.approved_at else None,
            'paidAt': self.paid_at.isoformat() if self.paid_at else None,
            'notes': self.notes,
            'attachments': list(self.attachments),
        }


def round_currency(amount):
    """Round to a whole currency unit, halves toward positive infinity"""
    return int((Decimal(str(amount)) + Decimal('0.5')).to_integral_value(rounding=ROUND_FLOOR))


def milestone_value(total_value, percentage):
    """Share of the total, rounded to a whole currency unit"""
    share = Decimal(str(total_value)) * Decimal(str(percentage)) / Decimal(100)
    return round_currency(share)


def generate_milestones_from_template(template, total_value, start_date, contract_id='',
                                      absorb_remainder=False):
    """
    Materialize a template's default milestones for a contract.

    Values are rounded per milestone, so their sum can drift from total_value
    by a few units. With absorb_remainder the final milestone takes up the
    difference. A template without default milestones yields an empty list.
    """
    if not template.default_milestones:
        return []

    if isinstance(start_date, datetime):
        start_date = start_date.date()

    timestamp = int(time.time() * 1000)
    milestones = []
    for index, milestone_template in enumerate(template.default_milestones):
        due_date = start_date
        if milestone_template.due_offset:
            due_date = start_date + timedelta(days=milestone_template.due_offset)

        milestones.append(Milestone(
            id=f"milestone-{timestamp}-{index}",
            contract_id=contract_id,
            name=milestone_template.name,
            description=milestone_template.description,
            deliverables=list(milestone_template.deliverables),
            value=milestone_value(total_value, milestone_template.percentage),
            due_date=due_date,
        ))

    if absorb_remainder:
        remainder = round_currency(total_value) - sum(
            milestone.value for milestone in milestones
        )
        milestones[-1].value += remainder

    return milestones


def milestone_total(milestones):
    return sum(milestone.value for milestone in milestones)

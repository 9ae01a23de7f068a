"""
Contract Type Definitions
"""
from enum import Enum


class Jurisdiction(Enum):
    """Provinces a contract template can be written for"""
    BC = "BC"
    AB = "AB"
    ON = "ON"
    QC = "QC"

    @classmethod
    def get_display_name(cls, jurisdiction):
        """Get display name for a jurisdiction"""
        names = {
            cls.BC: "British Columbia",
            cls.AB: "Alberta",
            cls.ON: "Ontario",
            cls.QC: "Quebec"
        }
        return names.get(jurisdiction, jurisdiction.value)


class PricingType(Enum):
    """How the talent is paid under a contract"""
    HOURLY = "hourly"
    FIXED = "fixed"

    @classmethod
    def get_display_name(cls, pricing_type):
        """Get display name for pricing type"""
        names = {
            cls.HOURLY: "Hourly Contract",
            cls.FIXED: "Fixed Price Contract"
        }
        return names.get(pricing_type, pricing_type.value.title())

    @classmethod
    def get_all_types(cls):
        """Get all available pricing types"""
        return [
            {
                "value": pricing_type.value,
                "label": cls.get_display_name(pricing_type)
            }
            for pricing_type in cls
        ]


class ContractStatus(Enum):
    """Lifecycle states of a contract record"""
    DRAFT = "draft"
    PENDING_SIGNATURE = "pending_signature"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DISPUTED = "disputed"


class MilestoneStatus(Enum):
    """
    Milestone states as reported by the contracts backend.

    Transitions are decided server-side; the graph below is only used to
    describe which states may follow the one currently reported.
    """
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    PAID = "paid"
    DISPUTED = "disputed"
    REJECTED = "rejected"

    @classmethod
    def get_display_name(cls, status):
        """Get display name for milestone status"""
        return status.value.replace('_', ' ').title()

    @classmethod
    def get_next_states(cls, status):
        """States reachable in one step from the given status"""
        return list(MILESTONE_TRANSITIONS.get(cls(status), ()))

    @classmethod
    def can_transition(cls, current, target):
        """Check whether target may directly follow current"""
        return cls(target) in MILESTONE_TRANSITIONS.get(cls(current), ())

    @classmethod
    def is_terminal(cls, status):
        return not MILESTONE_TRANSITIONS.get(cls(status))


MILESTONE_TRANSITIONS = {
    MilestoneStatus.PENDING: (MilestoneStatus.IN_PROGRESS,),
    MilestoneStatus.IN_PROGRESS: (MilestoneStatus.SUBMITTED,),
    MilestoneStatus.SUBMITTED: (
        MilestoneStatus.APPROVED,
        MilestoneStatus.DISPUTED,
        MilestoneStatus.REJECTED,
    ),
    MilestoneStatus.APPROVED: (MilestoneStatus.PAID, MilestoneStatus.DISPUTED),
    # Disputes are settled by the backend, either way
    MilestoneStatus.DISPUTED: (
        MilestoneStatus.APPROVED,
        MilestoneStatus.PAID,
        MilestoneStatus.REJECTED,
    ),
    MilestoneStatus.PAID: (),
    MilestoneStatus.REJECTED: (),
}

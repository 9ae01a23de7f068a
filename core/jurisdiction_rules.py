"""
Jurisdiction Rules - Province-specific legal terms for contracts
"""
JURISDICTION_RULES = {
    "BC": {
        "name": "British Columbia",
        "governing_law": "Laws of the Province of British Columbia and the federal laws of Canada applicable therein",
        "dispute_resolution": "Mediation in British Columbia, followed by binding arbitration under the Arbitration Act (British Columbia) if mediation fails.",
        "sales_taxes": ["GST", "PST"],
        "tax_note": "GST (5%) applies to most services. BC PST (7%) applies to certain software and related services.",
        "language_requirement": None,
        "legal_warning": "This contract is subject to British Columbia law. Please have it reviewed by a legal professional before signing."
    },

    "AB": {
        "name": "Alberta",
        "governing_law": "Laws of the Province of Alberta and the federal laws of Canada applicable therein",
        "dispute_resolution": "Mediation in Alberta, followed by binding arbitration under the Arbitration Act (Alberta) if mediation fails.",
        "sales_taxes": ["GST"],
        "tax_note": "GST (5%) applies to most services. Alberta has no provincial sales tax.",
        "language_requirement": None,
        "legal_warning": "This contract is subject to Alberta law. Please have it reviewed by a legal professional before signing."
    },

    "ON": {
        "name": "Ontario",
        "governing_law": "Laws of the Province of Ontario and the federal laws of Canada applicable therein",
        "dispute_resolution": "Mediation in Ontario, followed by binding arbitration under the Arbitration Act, 1991 (Ontario) if mediation fails.",
        "sales_taxes": ["HST"],
        "tax_note": "HST (13%) applies to most services supplied in Ontario.",
        "language_requirement": None,
        "legal_warning": "This contract is subject to Ontario law. Please have it reviewed by a legal professional before signing."
    },

    "QC": {
        "name": "Quebec",
        "governing_law": "Laws of the Province of Quebec, including the Civil Code of Quebec, and the federal laws of Canada applicable therein",
        "dispute_resolution": "Mediation in Quebec, followed by arbitration in accordance with the Code of Civil Procedure (Quebec) if mediation fails.",
        "sales_taxes": ["GST", "QST"],
        "tax_note": "GST (5%) and QST (9.975%) apply to most services supplied in Quebec.",
        "language_requirement": "Contracts of adhesion must be provided in French unless the parties expressly choose another language (Charter of the French Language).",
        "legal_warning": "This contract is subject to Quebec civil law and French-language requirements. Please have it reviewed by a legal professional before signing."
    }
}

DEFAULT_JURISDICTION = "BC"


def get_jurisdiction_rules(jurisdiction):
    """Get jurisdiction rules for a province code, falling back to the default province"""
    code = getattr(jurisdiction, 'value', jurisdiction) or DEFAULT_JURISDICTION
    return JURISDICTION_RULES.get(str(code).upper(), JURISDICTION_RULES[DEFAULT_JURISDICTION])


def get_available_jurisdictions():
    """Get list of available jurisdictions"""
    return [
        {"value": code, "label": rules["name"], "sales_taxes": list(rules["sales_taxes"])}
        for code, rules in JURISDICTION_RULES.items()
    ]

"""
Core utilities module for the contracts portal
Contains helpers, file utilities, and jurisdiction rules
"""
from .helpers import markdown_to_html, clean_contract_text
from .file_utils import build_contract_pdf, get_secure_filename
from .jurisdiction_rules import JURISDICTION_RULES, get_jurisdiction_rules

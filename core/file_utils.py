"""
File handling utilities
"""
import textwrap
import time

import fitz  # PyMuPDF
from django.utils.text import slugify

# A4 in points
PAGE_WIDTH = 595
PAGE_HEIGHT = 842
PAGE_MARGIN = 56
FONT_SIZE = 10
LINE_HEIGHT = 14
WRAP_WIDTH = 95


def get_secure_filename(original_filename, prefix=""):
    """Generate a secure filename with timestamp"""
    timestamp = int(time.time())
    # Get the file extension
    if '.' in original_filename:
        name, ext = original_filename.rsplit('.', 1)
        safe_name = slugify(name)[:50] or 'contract'  # Limit length
        filename = f"{timestamp}_{prefix}_{safe_name}.{ext}" if prefix else f"{timestamp}_{safe_name}.{ext}"
    else:
        safe_name = slugify(original_filename)[:50] or 'contract'
        filename = f"{timestamp}_{prefix}_{safe_name}" if prefix else f"{timestamp}_{safe_name}"
    return filename


def wrap_contract_lines(text, width=WRAP_WIDTH):
    """Split contract text into printable lines, keeping blank lines"""
    lines = []
    for paragraph in text.split('\n'):
        if not paragraph.strip():
            lines.append('')
            continue
        lines.extend(textwrap.wrap(paragraph, width=width, subsequent_indent='  ' if paragraph.startswith('- ') else ''))
    return lines


def build_contract_pdf(text, title=None):
    """Lay contract text out on A4 pages using PyMuPDF and return the PDF bytes"""
    lines = wrap_contract_lines(text)
    lines_per_page = (PAGE_HEIGHT - 2 * PAGE_MARGIN) // LINE_HEIGHT

    pdf_document = fitz.open()
    if title:
        pdf_document.set_metadata({'title': title})

    # Always emit at least one page
    for start in range(0, max(len(lines), 1), lines_per_page):
        page = pdf_document.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
        y = PAGE_MARGIN + FONT_SIZE
        for line in lines[start:start + lines_per_page]:
            if line:
                page.insert_text((PAGE_MARGIN, y), line, fontsize=FONT_SIZE, fontname='helv')
            y += LINE_HEIGHT

    pdf_bytes = pdf_document.tobytes()
    pdf_document.close()
    return pdf_bytes

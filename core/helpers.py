"""
Helper functions and utilities
"""
import html
import logging
import re

import markdown as md

logger = logging.getLogger(__name__)


def clean_contract_text(text):
    """Normalize rendered contract text for display and export"""
    if not text:
        return ""

    # Trailing whitespace left behind by empty optional values
    lines = [line.rstrip() for line in text.replace('\r\n', '\n').split('\n')]
    result = '\n'.join(lines).strip()

    # Collapse runs of blank lines
    return re.sub(r'\n{3,}', '\n\n', result)


def markdown_to_html(text):
    """Convert contract text to HTML with proper formatting"""
    if not text:
        return ""

    # Party names and addresses are user input; never let them through as markup
    escaped = html.escape(text, quote=False)

    extensions = [
        'extra',
        'nl2br',  # Convert newlines to <br>
        'sane_lists'
    ]

    try:
        output = md.markdown(
            escaped,
            extensions=extensions,
            output_format='html5'
        )
    except Exception as e:
        # Fallback to basic markdown if extensions fail
        logger.warning(f"Markdown extensions failed, using plain conversion: {e}")
        output = md.markdown(escaped)

    # Post-process HTML to ensure proper spacing and formatting
    output = re.sub(r'(</ul>|</ol>)', r'\1\n', output)
    output = re.sub(r'(</p>)', r'\1\n', output)
    return output


def render_html_document(title, body_html):
    """Wrap converted contract HTML in a standalone, print-friendly page"""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{html.escape(title)}</title>
    <style>
        body {{ font-family: 'Times New Roman', Times, serif; line-height: 1.6; max-width: 800px; margin: 0 auto; padding: 40px; }}
        p {{ text-align: justify; }}
        ul, ol {{ margin: 0 0 1em 1.5em; }}
    </style>
</head>
<body>
{body_html}
</body>
</html>"""

"""
Template tokens for headers, footers and watermarks

Templates are scanned left to right in a single pass. At each '{' the
longest known token starting there is substituted; anything else is copied
verbatim. Substituted values are never rescanned.
"""
from datetime import date
from typing import Dict, Optional

PAGE_TOKEN = "{page}"
TOTAL_TOKEN = "{total}"
DATE_TOKEN = "{date}"

DATE_FORMATS = ("short", "medium", "long", "iso")

_MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def format_date(value: date, date_format: str = "short") -> str:
    """Format a date the way the header/footer date selector describes it"""
    if date_format == "short":
        return f"{value.month:02d}/{value.day:02d}/{value.year}"
    if date_format == "medium":
        return f"{_MONTHS[value.month - 1][:3]} {value.day}, {value.year}"
    if date_format == "long":
        return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"
    if date_format == "iso":
        return value.isoformat()
    raise ValueError(f"Unknown date format: {date_format}")


def substitute(template: str, values: Dict[str, str]) -> str:
    """Replace every occurrence of the tokens in `values` within `template`"""
    if not template or '{' not in template:
        return template or ""

    # Longest first so a token that prefixes another never shadows it
    tokens = sorted(values, key=len, reverse=True)
    out = []
    i = 0
    n = len(template)
    while i < n:
        if template[i] == '{':
            for token in tokens:
                if template.startswith(token, i):
                    out.append(values[token])
                    i += len(token)
                    break
            else:
                out.append('{')
                i += 1
        else:
            j = template.find('{', i)
            if j == -1:
                j = n
            out.append(template[i:j])
            i = j
    return ''.join(out)


def page_tokens(page_number: int, total: int, today: Optional[date] = None,
                date_format: str = "short") -> Dict[str, str]:
    """Token values for one page"""
    return {
        PAGE_TOKEN: str(page_number),
        TOTAL_TOKEN: str(total),
        DATE_TOKEN: format_date(today or date.today(), date_format),
    }

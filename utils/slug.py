import re


def slugify(text: str) -> str:
    """'FHA Loans & More!' -> 'fha-loans-more'"""
    return re.sub(r"[^a-z0-9]+", "-", (text or "").lower()).strip("-")

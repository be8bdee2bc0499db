import re

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^a-z0-9-]")


def slugify(title: str) -> str:
    """Lowercase, hyphenate whitespace and drop anything outside [a-z0-9-]."""
    raw = str(title or "").strip().lower()
    return _DISALLOWED.sub("", _WHITESPACE.sub("-", raw))


def job_slug(title: str, job_id: int) -> str:
    """Slug for a job: slugified title suffixed with its identifier."""
    return f"{slugify(title)}-{job_id}"

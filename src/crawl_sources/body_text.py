"""Body-text extraction for scraped papers and technical documents.

Scraped documents interleave boilerplate (author blocks, affiliations,
headers) with body prose. The heuristic below keeps long, punctuated,
affiliation-free lines. It is approximate: some prose is dropped and some
boilerplate survives.
"""

from __future__ import annotations

from crawl_sources.html import parse_document

BODY_START_MIN_LENGTH = 100
BODY_LINE_MIN_LENGTH = 40

AFFILIATION_KEYWORDS = (
    "university",
    "lab",
    "department",
    "institute",
    "corresponding author",
)

# Non-breaking space that went through a wrong decode.
NBSP_ARTIFACT = "Ã‚"


def byte_length(text: str) -> int:
    """Length of a string in UTF-8 bytes; the body thresholds are byte counts."""
    return len(text.encode("utf-8"))


def is_valid_body_line(line: str, min_length: int) -> bool:
    """Return True if a line looks like body prose."""
    if "@" in line:
        return False

    lower = line.lower()
    if any(keyword in lower for keyword in AFFILIATION_KEYWORDS):
        return False

    if byte_length(line.strip()) < min_length:
        return False

    return "." in line


def _find_body_start(lines: list[str]) -> int:
    for i, line in enumerate(lines):
        clean = line.strip()
        if byte_length(clean) < BODY_START_MIN_LENGTH:
            continue
        if is_valid_body_line(clean, BODY_START_MIN_LENGTH):
            return i
    # No qualifying line: use the whole text.
    return 0


def extract_body_text(raw_markup: str) -> str:
    """Extract the cleaned, line-oriented body text of an HTML document."""
    document = parse_document(raw_markup)
    body = document.find("body") if document is not None else None
    if body is None:
        return ""

    full_text = "\n".join(body.itertext())
    lines = full_text.split("\n")
    start_index = _find_body_start(lines)

    kept = []
    for line in lines[start_index:]:
        clean = line.strip()
        if byte_length(clean) < BODY_LINE_MIN_LENGTH:
            continue
        if not is_valid_body_line(clean, BODY_LINE_MIN_LENGTH):
            continue
        kept.append(clean.replace(NBSP_ARTIFACT, " "))

    return "\n".join(kept)

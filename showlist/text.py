import re

from bs4 import BeautifulSoup

LINE_SEPARATOR = " / "
ELLIPSIS = "…"

_SPACE_RE = re.compile(r"[ \t\xa0]+")


def normalize(text: str | None) -> str:
    """
    Tidy plain text: runs of spaces/tabs become one space, ends are trimmed.

    Never parses markup, so it is safe to apply to text that is already clean
    (a literal '<b>' or '&amp;' in a title stays as it is).
    """
    if not text:
        return ""
    return _SPACE_RE.sub(" ", text).strip()


def html_to_text(fragment: str | None) -> str:
    """
    Plain text of an HTML fragment, with each <br> turned into ' / '.

    Decodes entities, so call it once on raw markup at the scraper boundary;
    use normalize() on anything already extracted.
    """
    if not fragment:
        return ""
    soup = BeautifulSoup(fragment, "lxml")
    for br in soup.find_all("br"):
        br.replace_with(LINE_SEPARATOR)
    return normalize(soup.get_text())


def truncate(text: str, limit: int = 1000) -> str:
    if len(text) <= limit:
        return text
    cut = text[: limit - 1]
    # Back off to the previous space rather than ending mid-word
    if not text[limit - 1].isspace() and " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip() + ELLIPSIS

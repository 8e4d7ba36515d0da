from typing import List

from bs4 import BeautifulSoup, SoupStrainer

from fuze.core.logging import get_logger

ANCHORS = SoupStrainer("a", href=True)

log = get_logger(__name__)


def extract_hrefs(html: str) -> List[str]:
    if not html:
        return []
    try:
        soup = BeautifulSoup(html, "html.parser", parse_only=ANCHORS)
        return [a["href"] for a in soup.find_all("a") if isinstance(a.get("href"), str)]
    except Exception as e:
        log.warning("could not parse markup, no links extracted: %s", e)
        return []

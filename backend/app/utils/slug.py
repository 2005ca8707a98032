import re
import unicodedata
from typing import Iterable, Set


_NON_SLUG_CHARS = re.compile(r"[^a-z0-9-]+")
_DASHES = re.compile(r"-{2,}")


# Paths used by the booking frontend that an organization slug must not shadow.
RESERVED_SLUGS: Set[str] = {
    "api",
    "auth",
    "book",
    "dashboard",
    "clients",
    "settings",
    "pricing",
    "team",
    "create-organization",
    "organization-profile",
    "organization-switcher",
}


def slugify_name(raw: str) -> str:
    """Convert an organization name to a URL-safe booking slug.

    Accented letters are folded to ASCII first, so "Café Détail" becomes
    "cafe-detail". Anything outside [a-z0-9] becomes a single dash and
    leading/trailing dashes are trimmed.
    """
    if not raw:
        return ""
    s = unicodedata.normalize("NFKD", raw)
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    s = s.strip().lower()
    if not s:
        return ""
    s = re.sub(r"[\s_]+", "-", s)
    s = _NON_SLUG_CHARS.sub("-", s)
    s = _DASHES.sub("-", s)
    return s.strip("-")


def generate_unique_slug(base: str, existing: Iterable[str]) -> str:
    """Return a unique slug based on *base* given an iterable of existing slugs.

    If the normalized base slug is free, use it. Otherwise append a numeric
    suffix: ``slug-2``, ``slug-3``, etc.
    """
    base_slug = slugify_name(base)
    if not base_slug:
        base_slug = "detailer"
    taken: Set[str] = {s for s in existing if s}
    taken.update(RESERVED_SLUGS)
    if base_slug not in taken:
        return base_slug
    counter = 2
    while True:
        candidate = f"{base_slug}-{counter}"
        if candidate not in taken:
            return candidate
        counter += 1

from __future__ import annotations

import re
import unicodedata


_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """
    Convert a human-readable title into a URL path segment.

    Accented letters fall back to their ASCII base letter, everything else that is not
    a lowercase letter or digit collapses into a single "-", e.g.
    "Introducing Kotlin support in Spring Framework 5.0" -> "introducing-kotlin-support-in-spring-framework-5-0".
    """
    ascii_title = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM.sub("-", ascii_title.lower()).strip("-")

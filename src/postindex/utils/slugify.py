"""Post slugs with MkDocs heading-id semantics."""

from unicodedata import normalize

from pymdownx.slugs import slugify as _md_slugify

_slugifier = _md_slugify(case="lower")


def slugify(text: str | None, max_len: int = 60) -> str:
    """Return an ASCII, lowercase, hyphen-separated slug for ``text``.

    Examples:
        >>> slugify("Semantic Caching!")
        'semantic-caching'
        >>> slugify("Café à Paris")
        'cafe-a-paris'

    """
    if text is None:
        return ""

    ascii_text = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = _slugifier(ascii_text, sep="-") or "post"
    if len(slug) > max_len:
        slug = slug[:max_len].rstrip("-")
    return slug

"""Comment content sanitization."""

import html

ALLOWED_TAGS = ("b", "i", "em", "strong", "code")


class HtmlSanitizer:
    """Escapes HTML in user content, keeping a few bare formatting tags.

    Only attribute-free tags are restored, so ``<b onclick=...>`` stays
    escaped.
    """

    def __init__(self, allowed_tags: tuple[str, ...] = ALLOWED_TAGS) -> None:
        self.allowed_tags = allowed_tags

    def sanitize(self, raw: str) -> str:
        escaped = html.escape(raw)
        for tag in self.allowed_tags:
            escaped = escaped.replace(f"&lt;{tag}&gt;", f"<{tag}>")
            escaped = escaped.replace(f"&lt;/{tag}&gt;", f"</{tag}>")
        return escaped

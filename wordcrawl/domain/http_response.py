from typing import NamedTuple, Optional


class HttpResponse(NamedTuple):
    """Response from HTTP fetch operation."""
    status_code: int
    text: str
    content_type: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return 200 <= int(self.status_code) < 300

    @property
    def is_text(self) -> bool:
        # Supported: text/html, application/xhtml+xml, any text/*, or unknown
        ct = (self.content_type or "").lower()
        return ct == "" or ct.startswith("text/") or "application/xhtml+xml" in ct

"""HTTP request and response messages."""

from dataclasses import dataclass, field


@dataclass
class HttpRequest:
    """A parsed HTTP request."""

    method: str
    path: str
    http_version: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    def to_string(self) -> str:
        """Render a readable summary, headers in key order."""
        lines = [
            f"Method: {self.method}",
            f"HTTP Version: {self.http_version}",
            f"Path: {self.path}",
            "Headers:",
        ]
        lines.extend(f"  {key}: {value}" for key, value in sorted(self.headers.items()))
        lines.append(f"Body: {self.body}")
        return "\n".join(lines) + "\n"


@dataclass
class HttpResponse:
    """An HTTP response."""

    http_version: str
    status_code: int
    status_desc: str
    headers: dict[str, str]
    body: str
"""Parsing of raw HTTP request text."""

from .messages import HttpRequest
from .textutils import split_char, split_str, trim


def parse_request(data: bytes | str) -> HttpRequest:
    """Parse a raw request into an HttpRequest.

    Text after a NUL character is ignored. Only the part between the first and
    second blank line is kept as the body. Raises ValueError on malformed input.
    """
    text = data.decode("iso-8859-1") if isinstance(data, bytes) else data
    text = text.split("\0", 1)[0]

    info_body = split_str(text, "\r\n\r\n")
    if len(info_body) < 2:
        raise ValueError("request has no blank line after the headers")
    info, body = info_body[0], info_body[1]

    request_info_lines = split_str(info, "\r\n")
    request_line = split_char(request_info_lines[0], " ")
    if len(request_line) < 3:
        raise ValueError(f"malformed request line: {request_info_lines[0]!r}")

    headers: dict[str, str] = {}
    for line in request_info_lines[1:]:
        key_val = split_char(line, ":", 1)
        if len(key_val) < 2:
            raise ValueError(f"malformed header line: {line!r}")
        headers[key_val[0]] = trim(key_val[1])

    return HttpRequest(request_line[0], request_line[1], request_line[2], headers, body)
# minihttpd

A small HTTP server built on plain TCP sockets. It accepts one connection at
a time and reads the request with a single receive of up to 1 MiB. It parses
the request line, the headers and the body, and prints the parsed request to
standard output. It then answers every client with the same `200 OK`
response, whose body is `Hello World!`, and closes the connection.

## Installation

```
pip install .
```

## Running the server

```
minihttpd
minihttpd --port 8080
```

The server listens on all IPv4 interfaces, on port 7777 unless `--port` is
given. It handles clients one after another until it is interrupted with
Ctrl-C or an error stops it. You can check it with any HTTP client:

```
curl http://localhost:7777/
```

If the port cannot be bound, the command prints `Failed Server Init: ...` to
standard error and exits with status 1. If a client cannot be accepted, it
prints `New Connection Refused:...` and exits with status 0.

A request that cannot be parsed is reported on standard error as
`Malformed request: ...`. The client still gets the fixed reply.

## Using it as a library

```python
from minihttpd.parser import parse_request

request = parse_request(
    b"GET /index.html HTTP/1.1\r\nHost: localhost\r\n\r\n"
)
print(request.method, request.path, request.headers)
print(request.to_string())
```

`parse_request` accepts `bytes` or `str` and returns an `HttpRequest` from
`minihttpd.messages`. The `HttpRequest` dataclass has the fields `method`,
`path`, `http_version`, `headers` and `body`. Some details of the parser:

- Bytes are decoded as ISO-8859-1.
- Anything after a NUL character is ignored.
- Header values have their surrounding spaces removed.
- The body is only the text between the first and second `\r\n\r\n`.
- Input with no blank line after the headers, a request line with fewer than
  three parts, or a header line without `:` raises `ValueError`.

`HttpRequest.to_string()` renders a readable summary with the headers sorted
by name.

`minihttpd.messages` also defines an `HttpResponse` dataclass with the fields
`http_version`, `status_code`, `status_desc`, `headers` and `body`.

The `Server` class in `minihttpd.server` binds to a port when it is created.
If you pass port `0`, the operating system picks a free port, and
`server.port` holds the port that was bound. The class can be used as a
context manager:

- `serve_once()` handles a single client. It returns the parsed request, or
  `None` if the request could not be parsed.
- `run()` loops forever.
- `close()` closes the listening socket.

```python
from minihttpd.server import Server

with Server(8080) as server:
    request = server.serve_once()
```

The helpers in `minihttpd.textutils` are the string routines the parser is
built on:

- `split_char(s, delimiter, splits=-1, skips=0)` splits on one character,
  with an optional limit on splits and a number of leading delimiters to
  skip.
- `split_str` splits on a string.
- `trim` strips spaces from both ends.

## Errors

These exceptions are defined in `minihttpd.errors`. Both are subclasses of
`RuntimeError`.

- `ConnectionRefusedError_` is raised when the server cannot listen or a
  client fails to connect.
- `ConnectionFailedError` is not raised by the server itself. `main` reports
  it as `New Connection Failed:...` if it reaches the command.

## What it does not do

The reply is always the same, whatever the request. There is no routing, no
serving of files and no use of `HttpResponse` to build replies. Clients are
served one at a time on a single thread. The request is read with one
receive, so a request that arrives in several pieces is only partly seen.

## Development

```
pip install -e ".[test]"
pytest
```
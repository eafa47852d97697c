"""Exceptions raised by the server when a connection cannot be made."""


class ConnectionFailedError(RuntimeError):
    """A new connection was attempted but failed."""


class ConnectionRefusedError_(RuntimeError):
    """The server refused a connection or could not accept one."""
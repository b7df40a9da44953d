"""``host:port`` addresses — purely syntactic, never resolved."""

from __future__ import annotations

from mega.config.errors import quote

MAX_PORT = 65535


def split_host_port(hostport: str) -> tuple[str, str]:
    """Split ``"host:port"`` or ``"[ipv6]:port"`` into host and port strings.

    The host may be empty. Brackets are stripped from IPv6 hosts.

    Raises:
        ValueError: if the address has no port, too many colons, or
            misplaced brackets.
    """
    i = hostport.rfind(":")
    if i < 0:
        raise ValueError("missing port in address")

    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise ValueError("missing ']' in address")
        if end + 1 == len(hostport):
            raise ValueError("missing port in address")
        if end + 1 != i:
            if hostport[end + 1] == ":":
                raise ValueError("too many colons in address")
            raise ValueError("missing port in address")
        host = hostport[1:end]
        host_from, port_from = 1, end + 1
    else:
        host = hostport[:i]
        if ":" in host:
            raise ValueError("too many colons in address")
        host_from, port_from = 0, 0

    if "[" in hostport[host_from:]:
        raise ValueError("unexpected '[' in address")
    if "]" in hostport[port_from:]:
        raise ValueError("unexpected ']' in address")
    return host, hostport[i + 1:]


def join_host_port(host: str, port: int | str) -> str:
    """Inverse of :func:`split_host_port`; brackets hosts containing a colon."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def parse_port(port: str) -> int:
    """Return *port* as an int in ``[0, 65535]``; decimal digits only."""
    if (
        not port
        or len(port) > len(str(MAX_PORT))
        or not all("0" <= ch <= "9" for ch in port)
        or int(port) > MAX_PORT
    ):
        raise ValueError(f"invalid port {quote(port)}")
    return int(port)


def parse_host_port(raw: str) -> str:
    """Validate *raw* as ``host:port`` and return its canonical form."""
    host, port = split_host_port(raw)
    return join_host_port(host, parse_port(port))

"""Remote address resolution behind reverse proxies.

Follows the usual connection-info order: the RFC 7239 ``Forwarded`` header,
then ``X-Forwarded-For``, then the socket peer. Proxy headers are only
consulted when the deployment says they can be trusted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _forwarded_for(value: str) -> str | None:
    """Extract the ``for=`` node of the first Forwarded element."""
    first = value.split(",")[0]
    for pair in first.split(";"):
        name, sep, node = pair.strip().partition("=")
        if sep and name.strip().lower() == "for":
            node = node.strip().strip('"')
            return node or None
    return None


def _x_forwarded_for(value: str) -> str | None:
    """Extract the client (first) entry of X-Forwarded-For."""
    client = value.split(",")[0].strip()
    return client or None


def resolve_remote_address(
    get_header: Callable[[str], str | None],
    peer: str | None,
    *,
    trust_forwarded: bool = False,
) -> str | None:
    """Resolve the remote address of a connection.

    Args:
        get_header: Case-insensitive header lookup returning text or None
        peer: Address of the socket peer, if known
        trust_forwarded: Honor Forwarded / X-Forwarded-For headers

    Returns:
        Address text (not validated), or None
    """
    if trust_forwarded:
        forwarded = get_header("forwarded")
        if forwarded:
            addr = _forwarded_for(forwarded)
            if addr:
                return addr

        x_forwarded_for = get_header("x-forwarded-for")
        if x_forwarded_for:
            addr = _x_forwarded_for(x_forwarded_for)
            if addr:
                return addr

    return peer or None

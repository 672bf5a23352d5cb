"""Remote address resolution."""

from sendermeta.core.network.remote import resolve_remote_address

__all__ = ["resolve_remote_address"]

from .context import MemberContext
from .resolver import get_member_context, resolve_member_context
from .store import DjangoSessionMemberStore, InMemoryMemberStore

__all__ = [
    "MemberContext",
    "DjangoSessionMemberStore",
    "InMemoryMemberStore",
    "get_member_context",
    "resolve_member_context",
]

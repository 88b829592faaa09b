from academy.application.ports.session import MemberSessionStore
from academy.application.ports.notifications import NotificationSink

__all__ = [
    "MemberSessionStore",
    "NotificationSink",
]

# apps/core/middleware/member.py
from apps.core.session.resolver import resolve_member_context


class MemberContextMiddleware:
    """
    세션 → request.member_context 주입.
    SessionMiddleware 뒤에 위치해야 한다.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.member_context = resolve_member_context(request)
        return self.get_response(request)

from django.test import SimpleTestCase, override_settings
from django.test.client import RequestFactory

from academy.domain.members.entities import MemberIdentity
from apps.core.session import InMemoryMemberStore, MemberContext, resolve_member_context
from apps.core.session.store import SESSION_ADMIN_KEY, SESSION_MEMBER_KEY

IDENTITY = MemberIdentity(id=7, username="student07", member_type="parent", student_name="박민수")


class MemberContextTest(SimpleTestCase):
    def test_anonymous_by_default(self):
        ctx = MemberContext.from_store(InMemoryMemberStore())
        self.assertFalse(ctx.is_authenticated)
        self.assertFalse(ctx.is_admin)

    def test_authenticate_and_forget(self):
        store = InMemoryMemberStore()
        ctx = MemberContext.from_store(store)

        ctx.authenticate(IDENTITY)
        self.assertEqual(store.data[SESSION_MEMBER_KEY]["username"], "student07")
        self.assertEqual(MemberContext.from_store(store).member, IDENTITY)

        ctx.forget()
        self.assertIsNone(ctx.member)
        self.assertNotIn(SESSION_MEMBER_KEY, store.data)

    def test_admin_flag_independent_of_member(self):
        store = InMemoryMemberStore({SESSION_MEMBER_KEY: IDENTITY.to_dict()})
        ctx = MemberContext.from_store(store)

        ctx.grant_admin()
        self.assertTrue(store.data[SESSION_ADMIN_KEY])
        ctx.forget()
        self.assertTrue(MemberContext.from_store(store).is_admin)

        ctx.revoke_admin()
        self.assertFalse(MemberContext.from_store(store).is_admin)

    def test_broken_session_payload_is_anonymous(self):
        for payload in ({"username": "x"}, {"id": "abc", "username": "x"}, "garbage"):
            store = InMemoryMemberStore({SESSION_MEMBER_KEY: payload})
            self.assertIsNone(MemberContext.from_store(store).member)


class ResolveMemberContextTest(SimpleTestCase):
    def test_request_without_session(self):
        request = RequestFactory().get("/")
        ctx = resolve_member_context(request)
        self.assertFalse(ctx.is_authenticated)

    @override_settings(MEMBER_SESSION_STORE="apps.core.session.store.InMemoryMemberStore")
    def test_store_class_from_settings(self):
        request = RequestFactory().get("/")
        request.session = {SESSION_MEMBER_KEY: IDENTITY.to_dict()}
        ctx = resolve_member_context(request)
        self.assertIsInstance(ctx.store, InMemoryMemberStore)
        self.assertEqual(ctx.member, IDENTITY)

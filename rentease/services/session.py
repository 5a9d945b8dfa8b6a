"""
Session and role resolution.

A ``SessionContext`` follows one browser session: it owns a dedicated backend
client, listens to that client's auth state changes and re-derives the role
capabilities on every transition (sign-in, sign-out, token refresh). Consumers
subscribe to the context and receive each new ``SessionState``; tearing a
consumer down means calling ``Subscription.unsubscribe()``.

The ``SessionManager`` is the process-wide registry of contexts, keyed by the
opaque token handed to the browser at sign-in. Role checks here only decide
what the UI shows; the record store's row-level policies remain the
authoritative enforcement point.
"""

from typing import Any, Awaitable, Callable, Dict, FrozenSet, Optional, Tuple
import asyncio
import enum
import logging
import secrets
import time
import uuid

import httpx
from supabase import AuthError

from rentease.models.user import Identity, UserRole
from rentease.repositories.user import RoleRepository
from rentease.utils.exceptions import (
    InvalidCredentialsError,
    RemoteCallError,
    RemoteServiceError
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], Awaitable[Any]]
SessionListener = Callable[["SessionState"], None]


class Page(str, enum.Enum):
    """Views of the application, for per-page capability checks."""
    HOME = "home"
    PROPERTIES = "properties"
    PROPERTY_DETAILS = "property_details"
    AUTH = "auth"
    ABOUT = "about"
    CONTACT = "contact"
    OWNER_DASHBOARD = "owner_dashboard"
    ADMIN_DASHBOARD = "admin_dashboard"


# Pages missing from this map are public
PAGE_ROLES: Dict[Page, UserRole] = {
    Page.OWNER_DASHBOARD: UserRole.OWNER,
    Page.ADMIN_DASHBOARD: UserRole.ADMIN,
}


class SessionState:
    """Immutable snapshot of who is signed in and which roles they hold."""

    __slots__ = ("identity", "roles")

    def __init__(self, identity: Optional[Identity] = None, roles: FrozenSet[UserRole] = frozenset()):
        self.identity = identity
        # Roles never outlive the identity
        self.roles = frozenset(roles) if identity is not None else frozenset()

    @classmethod
    def anonymous(cls) -> "SessionState":
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def is_owner(self) -> bool:
        return UserRole.OWNER in self.roles

    @property
    def is_admin(self) -> bool:
        return UserRole.ADMIN in self.roles

    def has_role(self, role: UserRole) -> bool:
        return role in self.roles

    def can_access(self, page: Page) -> bool:
        """Whether role-gated UI for ``page`` should be shown."""
        required = PAGE_ROLES.get(page)
        if required is None:
            return True
        return self.is_authenticated and self.has_role(required)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SessionState):
            return NotImplemented
        return self.identity == other.identity and self.roles == other.roles

    def __repr__(self) -> str:
        user = self.identity.id if self.identity else None
        return f"SessionState(identity={user!r}, roles={sorted(r.value for r in self.roles)})"


class RoleResolver:
    """Looks up role assignments for an identity, failing closed."""

    def __init__(self, client: Any):
        self.role_repo = RoleRepository(client)

    async def resolve(self, identity_id: str) -> FrozenSet[UserRole]:
        """
        Get the roles held by an identity.

        Returns:
            The role set; empty if the lookup fails
        """
        try:
            roles = await self.role_repo.get_roles(identity_id)
        except RemoteCallError as e:
            logger.warning(f"Role lookup failed for user {identity_id}, denying role-gated access: {e}")
            return frozenset()

        logger.debug(f"Resolved roles for user {identity_id}: {sorted(r.value for r in roles)}")
        return roles


class Subscription:
    """Handle returned by ``SessionContext.subscribe``."""

    def __init__(self, context: "SessionContext", key: str):
        self._context = context
        self._key = key
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self._context._listeners.pop(self._key, None)
            self.active = False


class SessionContext:
    """Live session state of one browser session."""

    def __init__(self, client: Any, role_resolver: Optional[RoleResolver] = None):
        self.client = client
        self.role_resolver = role_resolver or RoleResolver(client)
        self._state = SessionState.anonymous()
        self._listeners: Dict[str, SessionListener] = {}
        self._auth_subscription: Any = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._pending: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    async def start(self) -> "SessionContext":
        """Register for auth state changes and evaluate the current session."""
        self._loop = asyncio.get_running_loop()
        self._auth_subscription = self.client.auth.on_auth_state_change(self._on_auth_event)
        await self.refresh()
        return self

    async def refresh(self) -> SessionState:
        """Re-read the session from the auth client and re-derive roles."""
        session = await self.client.auth.get_session()
        await self._evaluate(session)
        return self._state

    async def settle(self) -> SessionState:
        """Wait for any in-flight re-evaluation, then return the current state."""
        while self._pending is not None and not self._pending.done():
            await asyncio.wait({self._pending})
        return self._state

    def subscribe(self, listener: SessionListener) -> Subscription:
        """Call ``listener`` with every new state until unsubscribed or closed."""
        key = uuid.uuid4().hex
        self._listeners[key] = listener
        return Subscription(self, key)

    async def sign_out(self) -> None:
        """Sign out through the auth service; the SIGNED_OUT event clears the state."""
        try:
            await self.client.auth.sign_out()
        except (AuthError, httpx.HTTPError) as e:
            logger.warning(f"Remote sign-out failed, clearing local session anyway: {e}")
        await self.settle()
        if self._state.is_authenticated:
            await self._evaluate(None)

    def close(self) -> None:
        """
        Tear the context down.

        Deregisters from the auth client, cancels any in-flight re-evaluation and
        drops every listener; no listener is invoked after this returns.
        """
        if self._closed:
            return
        self._closed = True

        if self._auth_subscription is not None:
            self._auth_subscription.unsubscribe()
            self._auth_subscription = None

        task, self._pending = self._pending, None
        if task is not None and not task.done() and task is not _current_task():
            task.cancel()

        self._listeners.clear()
        logger.debug("Session context closed")

    def _on_auth_event(self, event: str, session: Any) -> None:
        if self._closed:
            return
        logger.debug(f"Auth state change: {event}")

        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is not None:
            self._schedule(session)
        elif self._loop is not None and not self._loop.is_closed():
            self._loop.call_soon_threadsafe(self._schedule, session)

    def _schedule(self, session: Any) -> None:
        if self._closed:
            return
        # A newer transition supersedes an evaluation still in flight
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = asyncio.ensure_future(self._evaluate(session))

    async def _evaluate(self, session: Any) -> None:
        identity = Identity.from_session(session)
        if identity is None:
            state = SessionState.anonymous()
        else:
            roles = await self.role_resolver.resolve(identity.id)
            state = SessionState(identity, roles)

        if self._closed:
            return

        self._state = state
        for listener in list(self._listeners.values()):
            if self._closed:
                break
            try:
                listener(state)
            except Exception:
                logger.exception("Session listener failed")


def _current_task() -> Optional[asyncio.Task]:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


class SessionManager:
    """
    Process-wide registry of live session contexts.

    Each context is watched; once it reports a signed-out state it is evicted
    and closed, so later requests carrying its token resolve as anonymous.
    Contexts not used for ``idle_timeout`` seconds are evicted the same way.
    """

    def __init__(
        self,
        client_factory: ClientFactory,
        idle_timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        self._client_factory = client_factory
        self._idle_timeout = idle_timeout
        self._clock = clock
        self._contexts: Dict[str, SessionContext] = {}
        self._watchers: Dict[str, Subscription] = {}
        self._last_used: Dict[str, float] = {}
        self._anonymous_client: Any = None

    def __len__(self) -> int:
        return len(self._contexts)

    async def anonymous_client(self) -> Any:
        """Shared client for public reads and writes (no signed-in user)."""
        if self._anonymous_client is None:
            self._anonymous_client = await self._client_factory()
        return self._anonymous_client

    def get(self, token: Optional[str]) -> Optional[SessionContext]:
        self.evict_idle()
        if not token:
            return None
        context = self._contexts.get(token)
        if context is not None:
            self._last_used[token] = self._clock()
        return context

    def evict_idle(self) -> int:
        """Close every context idle for longer than the timeout; returns how many went."""
        if self._idle_timeout is None:
            return 0
        cutoff = self._clock() - self._idle_timeout
        expired = [token for token, used in self._last_used.items() if used < cutoff]
        for token in expired:
            self._evict(token)
        if expired:
            logger.info(f"Evicted {len(expired)} idle session(s)")
        return len(expired)

    async def sign_in(self, email: str, password: str) -> Tuple[str, SessionContext]:
        """
        Sign in with email and password and register the new session.

        Returns:
            Tuple of (session token, context)

        Raises:
            InvalidCredentialsError: If the auth service rejects the credentials
            RemoteServiceError: If the auth service cannot be reached
        """
        context = await self._open_context()
        try:
            await context.client.auth.sign_in_with_password({"email": email, "password": password})
        except AuthError as e:
            context.close()
            logger.warning(f"Failed sign-in attempt for {email}: {e}")
            raise InvalidCredentialsError()
        except httpx.HTTPError as e:
            context.close()
            logger.error(f"Auth service unreachable during sign-in: {e}")
            raise RemoteServiceError("Authentication service unavailable")

        await context.settle()
        if not context.state.is_authenticated:
            await context.refresh()
        if not context.state.is_authenticated:
            context.close()
            raise InvalidCredentialsError()

        token = self._register(context)
        logger.info(f"User signed in: {email}")
        return token, context

    async def sign_up(self, name: str, email: str, password: str) -> Tuple[Optional[str], Optional[SessionContext]]:
        """
        Create an account; the display name is stored as user metadata.

        When the auth service returns a session immediately (no email
        confirmation), the new session is registered and returned.

        Returns:
            Tuple of (session token, context), both None when confirmation is pending
        """
        context = await self._open_context()
        try:
            response = await context.client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {"data": {"name": name}}
            })
        except AuthError as e:
            context.close()
            logger.warning(f"Sign-up rejected for {email}: {e}")
            raise RemoteServiceError(f"Sign up failed: {getattr(e, 'message', str(e))}")
        except httpx.HTTPError as e:
            context.close()
            logger.error(f"Auth service unreachable during sign-up: {e}")
            raise RemoteServiceError("Authentication service unavailable")

        logger.info(f"Account created: {email}")
        if getattr(response, "session", None) is None:
            context.close()
            return None, None

        await context.settle()
        if not context.state.is_authenticated:
            await context.refresh()
        return self._register(context), context

    async def sign_out(self, token: Optional[str]) -> None:
        """Sign out and tear down the session registered under ``token``."""
        context = self.get(token)
        if context is None:
            return
        try:
            await context.sign_out()
        finally:
            self._evict(token)
        logger.info("User signed out")

    def close_all(self) -> None:
        for token in list(self._contexts):
            self._evict(token)

    async def _open_context(self) -> SessionContext:
        client = await self._client_factory()
        return await SessionContext(client).start()

    def _register(self, context: SessionContext) -> str:
        self.evict_idle()
        token = secrets.token_urlsafe(32)
        self._contexts[token] = context
        self._last_used[token] = self._clock()
        self._watchers[token] = context.subscribe(lambda state: self._on_state_change(token, state))
        return token

    def _on_state_change(self, token: str, state: SessionState) -> None:
        if not state.is_authenticated:
            logger.debug("Session ended remotely, evicting")
            self._evict(token)

    def _evict(self, token: str) -> None:
        self._last_used.pop(token, None)
        watcher = self._watchers.pop(token, None)
        if watcher is not None:
            watcher.unsubscribe()
        context = self._contexts.pop(token, None)
        if context is not None:
            context.close()

"""Current principal resolution and tracking.

PrincipalResolver turns an identity session into a Principal (or None).
SessionWatcher keeps the resolved principal in step with the identity
provider: every auth-state change replaces the snapshot and pushes it to
subscribed dependents until the watcher is closed. It follows the identity
provider's single current session, so it suits one signed-in user per
process (a desktop or CLI client); the HTTP API resolves principals per
request with PrincipalResolver instead.

Resolution rules:
    - No session -> None
    - No `users` profile for the session user -> None
    - Deactivated profile -> None
    - Store failure while loading the profile -> logged, None

Usage:
    watcher = SessionWatcher(identity=identity, resolver=resolver, logger=logger)
    await watcher.start()
    unsubscribe = watcher.subscribe(lambda principal: ...)
    ...
    await watcher.close()
"""

import asyncio
from collections.abc import Callable

from taskhub.core.result import Failure, Success
from taskhub.domain.entities import AuthSession, AuthUser, Principal
from taskhub.domain.protocols import (
    AuthEvent,
    IdentityProviderProtocol,
    LoggerProtocol,
    PrincipalRepository,
    Unsubscribe,
)

type PrincipalListener = Callable[[Principal | None], None]


class PrincipalResolver:
    """One-shot session -> Principal resolution."""

    def __init__(self, principals: PrincipalRepository, logger: LoggerProtocol) -> None:
        self._principals = principals
        self._logger = logger

    async def resolve(self, session: AuthSession | None) -> Principal | None:
        """Resolve the principal behind ``session``, None when there is none."""
        if session is None:
            return None
        return await self.resolve_user(session.user)

    async def resolve_user(self, user: AuthUser) -> Principal | None:
        """Resolve the active principal whose id is ``user.id``."""
        match await self._principals.find_by_id(user.id):
            case Failure(error=error):
                self._logger.error(
                    "principal_resolution_failed",
                    user_id=user.id,
                    error_code=error.code.value,
                    error_message=error.message,
                )
                return None
            case Success(value=None):
                self._logger.info("principal_profile_missing", user_id=user.id)
                return None
            case Success(value=principal):
                if not principal.is_active:
                    self._logger.info("principal_inactive", user_id=user.id)
                    return None
                return principal


class SessionWatcher:
    """Subscription keeping the current Principal snapshot up to date.

    Auth changes arrive as synchronous callbacks; resolution runs as a task
    on the running event loop. A generation counter discards resolutions
    overtaken by a newer change, so a slow lookup never resurrects a
    principal after sign-out.
    """

    def __init__(
        self,
        *,
        identity: IdentityProviderProtocol,
        resolver: PrincipalResolver,
        logger: LoggerProtocol,
    ) -> None:
        self._identity = identity
        self._resolver = resolver
        self._logger = logger
        self._current: Principal | None = None
        self._generation = 0
        self._listeners: dict[int, PrincipalListener] = {}
        self._next_listener_id = 0
        self._pending: set[asyncio.Task[None]] = set()
        self._unsubscribe_identity: Unsubscribe | None = None

    @property
    def current(self) -> Principal | None:
        """Latest resolved principal, None when unauthenticated."""
        return self._current

    @property
    def running(self) -> bool:
        return self._unsubscribe_identity is not None

    async def start(self) -> Principal | None:
        """Subscribe to the identity provider and resolve the current session.

        Returns:
            The initial snapshot.

        Raises:
            RuntimeError: Already started and not closed.
        """
        if self.running:
            raise RuntimeError("SessionWatcher is already running")

        self._unsubscribe_identity = self._identity.subscribe(self._on_auth_change)
        self._generation += 1
        await self._resolve_and_publish(self._identity.current_session(), self._generation)
        return self._current

    def subscribe(self, listener: PrincipalListener) -> Unsubscribe:
        """Register a dependent; it receives every new snapshot."""
        listener_id = self._next_listener_id
        self._next_listener_id += 1
        self._listeners[listener_id] = listener

        def unsubscribe() -> None:
            self._listeners.pop(listener_id, None)

        return unsubscribe

    async def wait_until_settled(self) -> None:
        """Wait for every in-flight resolution to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
            self._pending = {task for task in self._pending if not task.done()}

    async def close(self) -> None:
        """Tear down the identity subscription, pending work and dependents."""
        if self._unsubscribe_identity is not None:
            self._unsubscribe_identity()
            self._unsubscribe_identity = None

        for task in self._pending:
            task.cancel()
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
        self._pending.clear()

        self._listeners.clear()
        self._generation += 1
        self._current = None

    def _on_auth_change(self, event: AuthEvent, session: AuthSession | None) -> None:
        self._generation += 1
        generation = self._generation

        if session is None:
            # Sign-out clears immediately; no lookup needed
            self._replace(None, event=event)
            return

        task = asyncio.get_running_loop().create_task(
            self._resolve_and_publish(session, generation, event=event)
        )
        self._pending.add(task)
        task.add_done_callback(lambda done: self._pending.discard(done))

    async def _resolve_and_publish(
        self,
        session: AuthSession | None,
        generation: int,
        *,
        event: AuthEvent | None = None,
    ) -> None:
        principal = await self._resolver.resolve(session)
        if generation != self._generation:
            self._logger.debug("principal_resolution_superseded", generation=generation)
            return
        self._replace(principal, event=event)

    def _replace(self, principal: Principal | None, *, event: AuthEvent | None) -> None:
        self._current = principal
        self._logger.info(
            "principal_snapshot_replaced",
            auth_event=event.value if event else None,
            principal_id=principal.id if principal else None,
            role=principal.role.value if principal else None,
        )
        for listener in list(self._listeners.values()):
            try:
                listener(principal)
            except Exception as e:
                self._logger.warning(
                    "principal_listener_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )

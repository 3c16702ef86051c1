"""Authentication state change fan-out shared by identity adapters.

Listeners are called synchronously in subscription order. A failing listener
is logged and skipped; the remaining listeners still run and the identity
operation that triggered the change still succeeds.

The tracked session is the adapter's own most recent one, shared by every
caller of that adapter instance. It serves single-user and embedded
consumers such as SessionWatcher. The HTTP API never reads it: each request
resolves its principal from its own bearer token.
"""

from taskhub.domain.entities import AuthSession
from taskhub.domain.protocols import AuthChangeListener, AuthEvent, LoggerProtocol, Unsubscribe


class AuthChangeNotifier:
    """Listener registry plus the provider's current session."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self._listeners: dict[int, AuthChangeListener] = {}
        self._next_token = 0
        self._session: AuthSession | None = None

    def current_session(self) -> AuthSession | None:
        """Last session published through this notifier, process-wide."""
        return self._session

    def subscribe(self, listener: AuthChangeListener) -> Unsubscribe:
        token = self._next_token
        self._next_token += 1
        self._listeners[token] = listener

        def unsubscribe() -> None:
            self._listeners.pop(token, None)

        return unsubscribe

    def publish(self, event: AuthEvent, session: AuthSession | None) -> None:
        self._session = session
        self._logger.info(
            "auth_state_changed",
            auth_event=event.value,
            user_id=session.user.id if session else None,
            listener_count=len(self._listeners),
        )
        for listener in list(self._listeners.values()):
            try:
                listener(event, session)
            except Exception as e:
                self._logger.warning(
                    "auth_listener_failed",
                    auth_event=event.value,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )

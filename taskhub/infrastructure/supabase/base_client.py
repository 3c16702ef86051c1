"""Shared HTTP handling for the Supabase adapters.

Handles:
- Request execution with timeout/connection error handling
- apikey + bearer headers
- Error body extraction (PostgREST and GoTrue shapes)
- JSON parsing with error handling

Each request opens its own ``httpx.AsyncClient`` bounded by the configured
timeout; nothing is retried.
"""

from typing import Any

import httpx
import structlog

from taskhub.core.enums import ErrorCode
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.errors import StoreError

RESPONSE_BODY_MAX_LENGTH = 500


class SupabaseHttpClient:
    """Base class for Supabase service clients.

    Attributes:
        _base_url: Project URL without trailing slash.
        _api_key: Project anon key, sent as ``apikey`` on every request.
        _timeout: Per-request timeout in seconds.
        _service: Service label for logs and error messages.
    """

    # Error type produced by this client; identity clients produce AuthError.
    error_type: type[StoreError] = StoreError

    def __init__(self, *, base_url: str, api_key: str, timeout: float, service: str) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._service = service
        self._logger = structlog.get_logger(f"supabase_{service}")

    def _headers(self, access_token: str | None = None, **extra: str) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {access_token or self._api_key}",
            **extra,
        }

    def _error(
        self,
        code: ErrorCode,
        message: str,
        *,
        collection: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> StoreError:
        return self.error_type(
            code=code,
            message=message,
            collection=collection,
            status_code=status_code,
            details=details,
        )

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        params: list[tuple[str, str]] | dict[str, str] | None = None,
        json_data: Any = None,
        operation: str,
        collection: str | None = None,
    ) -> Result[httpx.Response, StoreError]:
        """Send one request.

        Returns:
            Success(httpx.Response) for any HTTP response (status not checked).
            Failure(STORE_UNAVAILABLE) on timeout or connection error.
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    params=params,
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"supabase_{self._service}_timeout", operation=operation, error=str(e)
            )
            return Failure(
                error=self._error(
                    ErrorCode.STORE_UNAVAILABLE,
                    f"Supabase {self._service} request timed out",
                    collection=collection,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"supabase_{self._service}_connection_error", operation=operation, error=str(e)
            )
            return Failure(
                error=self._error(
                    ErrorCode.STORE_UNAVAILABLE,
                    f"Failed to connect to Supabase {self._service}: {e}",
                    collection=collection,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
        *,
        collection: str | None = None,
    ) -> Failure[StoreError] | None:
        """Translate a non-2xx response into a Failure, None when successful."""
        status = response.status_code
        if 200 <= status < 300:
            return None

        message = error_message_from(response)
        self._logger.warning(
            f"supabase_{self._service}_error_response",
            operation=operation,
            status_code=status,
            collection=collection,
        )
        return Failure(
            error=self._error(
                self._code_for_status(status),
                message,
                collection=collection,
                status_code=status,
                details={"body": response.text[:RESPONSE_BODY_MAX_LENGTH]},
            )
        )

    def _code_for_status(self, status: int) -> ErrorCode:
        if status >= 500:
            return ErrorCode.STORE_UNAVAILABLE
        return ErrorCode.STORE_REJECTED

    def _parse_json(
        self,
        response: httpx.Response,
        operation: str,
        *,
        collection: str | None = None,
    ) -> Result[Any, StoreError]:
        """Check status, then decode the JSON body."""
        error_result = self._check_error_response(response, operation, collection=collection)
        if error_result is not None:
            return error_result

        try:
            return Success(value=response.json())
        except ValueError as e:
            self._logger.error(
                f"supabase_{self._service}_invalid_json", operation=operation, error=str(e)
            )
            return Failure(
                error=self._error(
                    ErrorCode.STORE_INVALID_RESPONSE,
                    f"Invalid JSON response from Supabase {self._service}",
                    collection=collection,
                    status_code=response.status_code,
                )
            )

    def _invalid_shape(
        self, operation: str, expected: str, *, collection: str | None = None
    ) -> Failure[StoreError]:
        self._logger.warning(
            f"supabase_{self._service}_unexpected_format", operation=operation, expected=expected
        )
        return Failure(
            error=self._error(
                ErrorCode.STORE_INVALID_RESPONSE,
                f"Expected {expected} from Supabase {self._service}",
                collection=collection,
            )
        )


def error_message_from(response: httpx.Response) -> str:
    """Best-effort human message from a PostgREST or GoTrue error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:RESPONSE_BODY_MAX_LENGTH] or f"HTTP {response.status_code}"

    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"HTTP {response.status_code}"

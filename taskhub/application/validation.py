"""Input validation shared by command handlers.

All checks run before any store call and report ValidationError values.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from taskhub.core.enums import ErrorCode
from taskhub.core.errors import ValidationError
from taskhub.core.result import Failure, Result, Success

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_text(value: str | None, field: str) -> Result[str, ValidationError]:
    """Non-blank text, returned stripped."""
    text = (value or "").strip()
    if not text:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"{field} must not be blank",
                field=field,
            )
        )
    return Success(value=text)


def require_email(value: str | None) -> Result[str, ValidationError]:
    """Plausible email address, returned stripped and lower-cased."""
    email = (value or "").strip().lower()
    if not _EMAIL_PATTERN.match(email):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_EMAIL,
                message="A valid email address is required",
                field="email",
            )
        )
    return Success(value=email)


def restrict_changes(
    changes: Mapping[str, Any],
    allowed: Iterable[str],
    non_nullable: Iterable[str] = (),
) -> Result[dict[str, Any], ValidationError]:
    """Check a partial update: non-empty, only ``allowed`` fields.

    Fields in ``non_nullable`` may be omitted but never set to None.

    Text fields named in ``changes`` that must stay non-blank are checked by
    the caller.
    """
    if not changes:
        return Failure(
            error=ValidationError(
                code=ErrorCode.EMPTY_UPDATE,
                message="No changes supplied",
            )
        )

    unknown = sorted(set(changes) - set(allowed))
    if unknown:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"Fields cannot be changed: {', '.join(unknown)}",
                field=unknown[0],
                details={"fields": unknown},
            )
        )

    nulled = sorted(name for name in non_nullable if name in changes and changes[name] is None)
    if nulled:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"Fields cannot be null: {', '.join(nulled)}",
                field=nulled[0],
                details={"fields": nulled},
            )
        )
    return Success(value=dict(changes))

"""Authentication request and response schemas.

Covers registration, session creation/refresh and the current-principal
view used by clients to build their navigation.
"""

from pydantic import BaseModel, Field

from taskhub.application.commands.handlers.auth_handlers import SignedIn
from taskhub.domain.entities import AuthSession
from taskhub.domain.enums import Section
from taskhub.schemas.principal_schemas import PrincipalResponse

# =============================================================================
# Request Schemas
# =============================================================================


class RegistrationRequest(BaseModel):
    """Self sign-up request. New principals are always employees."""

    email: str = Field(..., description="Sign-in email", examples=["jane@example.com"])
    password: str = Field(..., min_length=1, description="Password")
    full_name: str = Field(..., description="Display name", examples=["Jane Doe"])


class SessionCreateRequest(BaseModel):
    """Sign-in request."""

    email: str = Field(..., description="Sign-in email")
    password: str = Field(..., min_length=1, description="Password")


class SessionRefreshRequest(BaseModel):
    """Refresh token exchange request."""

    refresh_token: str = Field(..., min_length=1, description="Refresh token")


# =============================================================================
# Response Schemas
# =============================================================================


class SessionResponse(BaseModel):
    """Issued session tokens.

    Attributes:
        access_token: Bearer token for subsequent requests.
        refresh_token: Token exchanged for a new session.
        token_type: Always "bearer".
        expires_in: Access token lifetime in seconds.
        principal: Resolved principal (present on sign-in).
    """

    access_token: str = Field(..., description="Bearer access token")
    refresh_token: str = Field(..., description="Refresh token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    principal: PrincipalResponse | None = Field(None, description="Signed-in principal")

    @classmethod
    def from_session(cls, session: AuthSession) -> "SessionResponse":
        return cls(
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            token_type=session.token_type,
            expires_in=session.expires_in,
        )

    @classmethod
    def from_signed_in(cls, signed_in: SignedIn) -> "SessionResponse":
        response = cls.from_session(signed_in.session)
        response.principal = PrincipalResponse.from_entity(signed_in.principal)
        return response


class SectionResponse(BaseModel):
    """Navigation section."""

    key: Section = Field(..., description="Section identifier")
    label: str = Field(..., description="Display label")

    @classmethod
    def from_section(cls, section: Section) -> "SectionResponse":
        return cls(key=section, label=section.label)


class NavigationResponse(BaseModel):
    """Sections visible to the current principal, in display order."""

    sections: list[SectionResponse] = Field(default_factory=list)


class MeResponse(BaseModel):
    """Current principal with the sections and permissions it grants."""

    principal: PrincipalResponse
    sections: list[SectionResponse] = Field(default_factory=list)
    permissions: list[str] = Field(
        default_factory=list,
        description="Granted permissions as resource:action",
        examples=[["tasks:read", "tasks:update_status"]],
    )

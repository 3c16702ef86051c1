"""Navigation router.

GET /navigation returns the sections the current principal may open.
"""

from fastapi import APIRouter

from taskhub.application.services import ordered_sections
from taskhub.presentation.routers.api.middleware.auth_dependencies import CurrentPrincipal
from taskhub.schemas.auth_schemas import NavigationResponse, SectionResponse

router = APIRouter(prefix="/navigation", tags=["Navigation"])


@router.get("", response_model=NavigationResponse, summary="Visible sections")
async def get_navigation(principal: CurrentPrincipal) -> NavigationResponse:
    return NavigationResponse(
        sections=[SectionResponse.from_section(s) for s in ordered_sections(principal.role)]
    )

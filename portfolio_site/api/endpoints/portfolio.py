"""API endpoint exposing the static portfolio content."""
from fastapi import APIRouter, status

from portfolio_site.core.content import portfolio_content
from portfolio_site.models.portfolio import PortfolioContent

router = APIRouter()


@router.get(
    "",
    response_model=PortfolioContent,
    status_code=status.HTTP_200_OK,
    summary="Get portfolio content",
    description="Get the profile, skills, services, education, experience, portfolio items, projects and contact channels.",
)
async def get_portfolio_content() -> PortfolioContent:
    return portfolio_content

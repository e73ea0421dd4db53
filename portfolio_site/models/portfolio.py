"""Data models for the static portfolio content.

These records hold the biographical content rendered into the page sections.
They carry no invariants beyond field presence.
"""

from typing import List
from typing_extensions import Annotated
from pydantic import BaseModel, Field


class Profile(BaseModel):
    """Profile shown in the hero and about sections.

    Attributes:
        name: Full name
        nickname: Short name used in greetings
        job: Current position
        location: City and province
        address: Postal address
        hobbies: List of hobbies
        photo: URL of the profile photo
    """
    name: str
    nickname: str
    job: str
    location: str
    address: str
    hobbies: List[str] = Field(default_factory=list)
    photo: str


class Project(BaseModel):
    title: str
    description: str
    technologies: List[str] = Field(default_factory=list)
    link: str


class Experience(BaseModel):
    title: str
    company: str
    description: str


class Education(BaseModel):
    level: str
    description: str


class PortfolioItem(BaseModel):
    title: str
    description: str


class ContactInfo(BaseModel):
    """Contact channels listed above the contact form.

    Attributes:
        office_email: Work email address
        personal_email: Personal email address
        whatsapp: WhatsApp number in local format
        tiktok: TikTok profile URL
        github: GitHub profile URL
        address: Postal address
    """
    office_email: str
    personal_email: str
    whatsapp: str
    tiktok: str
    github: str
    address: str

    @property
    def tiktok_handle(self) -> str:
        return "@" + self.tiktok.rstrip("/").rsplit("@", 1)[-1]

    @property
    def github_handle(self) -> str:
        return self.github.rstrip("/").rsplit("/", 1)[-1]


class NavLink(BaseModel):
    anchor: str
    label: str


class PortfolioContent(BaseModel):
    """All content rendered into the portfolio page.

    Attributes:
        profile: Hero/about profile
        about: Closing paragraph of the about section
        skills: Skill labels
        services: Offered services
        education: Education history
        experiences: Work experience
        portfolio_items: Portfolio highlights
        projects: Web app projects
        contact: Contact channels
        navigation: Header navigation links
    """
    profile: Profile
    about: Annotated[str, Field("", description="Closing paragraph of the about section")]
    skills: List[str] = Field(default_factory=list)
    services: List[str] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    experiences: List[Experience] = Field(default_factory=list)
    portfolio_items: List[PortfolioItem] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    contact: ContactInfo
    navigation: List[NavLink] = Field(default_factory=list)

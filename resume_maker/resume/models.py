"""Pydantic models for JSON Resume schema validation.

Declares the jsonresume.org v1.0.0 schema. Only ``basics.name`` is
required; every section tolerates additional properties, as the
upstream schema does. Declared fields may be omitted but not set to
null. URL fields take any scheme (``mailto:``, ``ftp:``...); an empty
string is not a URI and is rejected.
"""

from typing import Annotated, Optional

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    EmailStr,
    StringConstraints,
    field_validator,
)


Iso8601 = Annotated[
    str,
    StringConstraints(
        pattern=r"^([1-2][0-9]{3}-[0-1][0-9]-[0-3][0-9]|[1-2][0-9]{3}-[0-1][0-9]|[1-2][0-9]{3})$"
    ),
]


class Section(BaseModel):
    model_config = ConfigDict(extra="allow")

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("null is not allowed")
        return value


class Location(Section):
    """Geographic location information."""

    address: Optional[str] = None
    postalCode: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    countryCode: Optional[str] = None


class Profile(Section):
    """Social or professional profile link."""

    network: Optional[str] = None
    username: Optional[str] = None
    url: Optional[AnyUrl] = None


class Basics(Section):
    """Core biographical information."""

    name: str
    label: Optional[str] = None
    image: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    url: Optional[AnyUrl] = None
    summary: Optional[str] = None
    location: Optional[Location] = None
    profiles: list[Profile] = []


class Work(Section):
    """Work experience entry."""

    name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    position: Optional[str] = None
    url: Optional[AnyUrl] = None
    startDate: Optional[Iso8601] = None
    endDate: Optional[Iso8601] = None
    summary: Optional[str] = None
    highlights: list[str] = []


class Volunteer(Section):
    organization: Optional[str] = None
    position: Optional[str] = None
    url: Optional[AnyUrl] = None
    startDate: Optional[Iso8601] = None
    endDate: Optional[Iso8601] = None
    summary: Optional[str] = None
    highlights: list[str] = []


class Education(Section):
    """Education entry."""

    institution: Optional[str] = None
    url: Optional[AnyUrl] = None
    area: Optional[str] = None
    studyType: Optional[str] = None
    startDate: Optional[Iso8601] = None
    endDate: Optional[Iso8601] = None
    score: Optional[str] = None
    courses: list[str] = []


class Award(Section):
    title: Optional[str] = None
    date: Optional[Iso8601] = None
    awarder: Optional[str] = None
    summary: Optional[str] = None


class Certificate(Section):
    name: Optional[str] = None
    date: Optional[Iso8601] = None
    url: Optional[AnyUrl] = None
    issuer: Optional[str] = None


class Publication(Section):
    name: Optional[str] = None
    publisher: Optional[str] = None
    releaseDate: Optional[Iso8601] = None
    url: Optional[AnyUrl] = None
    summary: Optional[str] = None


class Skill(Section):
    """Skill category with keywords."""

    name: Optional[str] = None
    level: Optional[str] = None
    keywords: list[str] = []


class Language(Section):
    language: Optional[str] = None
    fluency: Optional[str] = None


class Interest(Section):
    name: Optional[str] = None
    keywords: list[str] = []


class Reference(Section):
    name: Optional[str] = None
    reference: Optional[str] = None


class Project(Section):
    """Personal or professional project."""

    name: Optional[str] = None
    description: Optional[str] = None
    highlights: list[str] = []
    keywords: list[str] = []
    startDate: Optional[Iso8601] = None
    endDate: Optional[Iso8601] = None
    url: Optional[AnyUrl] = None
    roles: list[str] = []
    entity: Optional[str] = None
    type: Optional[str] = None


class Meta(Section):
    canonical: Optional[AnyUrl] = None
    version: Optional[str] = None
    lastModified: Optional[str] = None


class Resume(Section):
    """Root resume model following the JSON Resume schema."""

    basics: Basics
    work: list[Work] = []
    volunteer: list[Volunteer] = []
    education: list[Education] = []
    awards: list[Award] = []
    certificates: list[Certificate] = []
    publications: list[Publication] = []
    skills: list[Skill] = []
    languages: list[Language] = []
    interests: list[Interest] = []
    references: list[Reference] = []
    projects: list[Project] = []
    meta: Optional[Meta] = None

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class SerperModel(BaseModel):
    """
    Base for Serper wire models: snake_case attributes, camelCase JSON keys.

    A JSON null decodes like a missing key: the field keeps its default
    ("" / 0 / [] for plain fields, None for optional sections).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.get_default(call_default_factory=True)
        return value


class Request(SerperModel):
    """
    Parameters for any Serper search vertical.

    Only `q` is always sent. Optional fields left unset (or set to a zero
    value such as "" or 0) are dropped from the payload.

    Example:
        request = Request(q="Copenhagen ferries", gl=GL_GERMANY, hl=HL_GERMAN, num=20)
    """

    q: str
    gl: str | None = None
    hl: str | None = None
    num: int | None = None
    autocorrect: bool | None = None
    page: int | None = None
    type: str | None = None
    location: str | None = None
    tbs: str | None = None
    safe: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(by_alias=True, exclude_none=True)
        return {key: value for key, value in payload.items() if key == "q" or value}

    def __str__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.to_payload().items())
        return f"Request({params})"


class Parameters(SerperModel):
    """Search parameters echoed back by Serper (`searchParameters`)."""

    q: str = ""
    gl: str = ""
    hl: str = ""
    num: int = 0
    autocorrect: bool = False
    page: int = 0
    type: str = ""
    location: str = ""


class BaseResponse(SerperModel):
    search_parameters: Parameters = Field(default_factory=Parameters)
    credits: int = 0


# Web search


class Sitelink(SerperModel):
    title: str = ""
    link: str = ""


class OrganicResult(SerperModel):
    title: str = ""
    link: str = ""
    snippet: str = ""
    position: int = 0
    date: str = ""
    sitelinks: list[Sitelink] | None = None
    attributes: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.title} ({self.link})"


class RelatedSearch(SerperModel):
    query: str = ""


class KnowledgeGraph(SerperModel):
    title: str = ""
    type: str = ""
    website: str = ""
    image_url: str = ""
    description: str = ""
    description_source: str = ""
    description_link: str = ""
    attributes: dict[str, Any] | None = None


class PeopleAlsoAsk(SerperModel):
    question: str = ""
    snippet: str = ""
    title: str = ""
    link: str = ""


class SearchResponse(BaseResponse):
    """Response from /search. Auxiliary sections are None when Serper omits them."""

    organic: list[OrganicResult] = []
    knowledge_graph: KnowledgeGraph | None = None
    people_also_ask: list[PeopleAlsoAsk] | None = None
    related_searches: list[RelatedSearch] | None = None


# Images


class ImageResult(SerperModel):
    title: str = ""
    image_url: str = ""
    image_width: int = 0
    image_height: int = 0
    thumbnail_url: str = ""
    thumbnail_width: int = 0
    thumbnail_height: int = 0
    source: str = ""
    domain: str = ""
    link: str = ""
    google_url: str = ""
    position: int = 0


class ImageResponse(BaseResponse):
    images: list[ImageResult] = []


# News


class NewsResult(SerperModel):
    title: str = ""
    link: str = ""
    snippet: str = ""
    date: str = ""
    source: str = ""
    image_url: str = ""
    position: int = 0


class NewsResponse(BaseResponse):
    news: list[NewsResult] = []


# Videos


class VideoResult(SerperModel):
    title: str = ""
    link: str = ""
    snippet: str = ""
    image_url: str = ""
    duration: str = ""
    source: str = ""
    channel: str = ""
    date: str = ""
    position: int = 0


class VideoResponse(BaseResponse):
    videos: list[VideoResult] = []


# Places


class PlaceResult(SerperModel):
    position: int = 0
    title: str = ""
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    rating: float = 0.0
    rating_count: int = 0
    category: str = ""
    phone_number: str = ""
    website: str = ""
    cid: str = ""
    thumbnail_url: str = ""


class PlacesResponse(BaseResponse):
    places: list[PlaceResult] = []


class ErrorEnvelope(SerperModel):
    """Body Serper sends alongside a 4xx/5xx status."""

    message: str = ""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, Union


class PocketListError(Exception):
    """Failed to list Pocket articles."""


class RequestSerializationError(PocketListError):
    pass


class TransportError(PocketListError):
    pass


class HTTPStatusError(PocketListError):
    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Pocket API returned HTTP {status_code}")


class ResponseDecodeError(PocketListError):
    pass


class ResponseParseError(PocketListError):
    pass


class MissingAccessTokenError(PocketListError):
    pass


class MissingConsumerKeyError(PocketListError):
    pass


class State(str, Enum):
    UNREAD = "unread"
    ARCHIVE = "archive"
    ALL = "all"

    @classmethod
    def parse(cls, value: Optional[str]) -> "State":
        if value == "archive":
            return cls.ARCHIVE
        if value == "all":
            return cls.ALL
        return cls.UNREAD


class Sort(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    TITLE = "title"
    SITE = "site"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Sort":
        if value in ("oldest", "title", "site"):
            return cls(value)
        return cls.NEWEST


class DetailType(str, Enum):
    SIMPLE = "simple"
    COMPLETE = "complete"

    @classmethod
    def from_flag(cls, details: bool) -> "DetailType":
        return cls.COMPLETE if details else cls.SIMPLE


# (attribute, wire name) pairs left out of the payload when unset
OPTIONAL_FIELDS = (
    ("state", "state"),
    ("tag", "tag"),
    ("sort", "sort"),
    ("search", "search"),
)


@dataclass(frozen=True)
class ArticleQuery:
    """
    Request payload for the Pocket /v3/get endpoint.

    Optional fields set to None are omitted from the payload entirely,
    since Pocket treats an absent field differently from an empty one.
    """

    consumer_key: str
    access_token: str
    detail_type: DetailType = DetailType.SIMPLE
    state: Optional[State] = None
    tag: Optional[str] = None
    sort: Optional[Sort] = None
    search: Optional[str] = None

    def __post_init__(self):
        if not self.consumer_key:
            raise MissingConsumerKeyError("Pocket consumer key is not configured")
        if not self.access_token:
            raise MissingAccessTokenError(
                "Pocket access token is not configured, authenticate first"
            )

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "consumer_key": self.consumer_key,
            "access_token": self.access_token,
            "detailType": self.detail_type.value,
        }
        for attr, wire_name in OPTIONAL_FIELDS:
            value = getattr(self, attr)
            if value is None:
                continue
            payload[wire_name] = value.value if isinstance(value, Enum) else value
        return payload

    def to_json(self) -> str:
        try:
            return json.dumps(self.to_payload())
        except (TypeError, ValueError) as e:
            raise RequestSerializationError(f"JSON serialization failed: {e}") from e

    def describe(self) -> Dict[str, Any]:
        """Payload without credentials, for logging."""
        payload = self.to_payload()
        payload.pop("consumer_key")
        payload.pop("access_token")
        return payload


@dataclass
class Article:
    item_id: str
    resolved_title: str = ""
    resolved_url: str = ""

    def format_line(self) -> str:
        return f"{self.item_id}: '{self.resolved_title}', {self.resolved_url}"


@dataclass
class ArticleListResult:
    status: int
    complete: int
    articles: Dict[str, Article] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == 1


@dataclass
class ListSuccess:
    articles: Dict[str, Article]


@dataclass
class RemoteFailure:
    status: int


ListOutcome = Union[ListSuccess, RemoteFailure]

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

REQUIRED_FIELDS = ("title", "date", "url", "media_type", "explanation")


@dataclass(frozen=True)
class ImageRecord:
    """One APOD entry. Passed through untouched from the API payload."""
    title: str
    date: str
    url: str
    media_type: str
    explanation: str
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_payload(cls, payload: Any) -> "ImageRecord":
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        missing = [k for k in REQUIRED_FIELDS if payload.get(k) is None]
        if missing:
            raise ValueError(f"missing fields: {', '.join(missing)}")
        return cls(
            title=str(payload["title"]),
            date=str(payload["date"]),
            url=str(payload["url"]),
            media_type=str(payload["media_type"]),
            explanation=str(payload["explanation"]),
            raw=dict(payload),
        )

    @property
    def is_image(self) -> bool:
        # Anything that is not an image (video, other) uses the video branch
        return self.media_type == "image"

    def to_dict(self) -> Dict[str, str]:
        return {k: getattr(self, k) for k in REQUIRED_FIELDS}


@dataclass(frozen=True)
class FetchResult:
    day: str
    record: Optional[ImageRecord] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None

    @classmethod
    def success(cls, day: str, record: ImageRecord) -> "FetchResult":
        return cls(day=day, record=record)

    @classmethod
    def failure(cls, day: str, reason: str) -> "FetchResult":
        return cls(day=day, reason=reason)


class Placeholder(Enum):
    LOADING = ("⏳", "Loading amazing space images...")
    ERROR = ("❌", "Error loading images. Please try again.")
    EMPTY = ("🔭", "No images found for the selected date range. Please try different dates.")

    @property
    def icon(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class GalleryState:
    """What the gallery area shows: tiles, or exactly one placeholder."""
    records: Tuple[ImageRecord, ...] = ()
    placeholder: Optional[Placeholder] = None

    @classmethod
    def loading(cls) -> "GalleryState":
        return cls(placeholder=Placeholder.LOADING)

    @classmethod
    def error(cls) -> "GalleryState":
        return cls(placeholder=Placeholder.ERROR)

    @classmethod
    def of(cls, records: Iterable[ImageRecord]) -> "GalleryState":
        records = tuple(records)
        if not records:
            return cls(placeholder=Placeholder.EMPTY)
        return cls(records=records)

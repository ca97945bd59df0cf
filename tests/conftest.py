import pytest

from services.records import ImageRecord


def make_payload(day, media_type="image", **extra):
    payload = {
        "title": f"Picture {day}",
        "date": day,
        "url": f"https://apod.nasa.gov/apod/image/{day}.jpg",
        "media_type": media_type,
        "explanation": f"What you see on {day}.",
    }
    payload.update(extra)
    return payload


@pytest.fixture
def payload_factory():
    return make_payload


@pytest.fixture
def image_record():
    return ImageRecord.from_payload(make_payload("2024-01-01"))


@pytest.fixture
def video_record():
    return ImageRecord.from_payload(
        make_payload("2024-01-02", media_type="video", url="https://www.youtube.com/embed/abc123")
    )

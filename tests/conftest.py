import pytest

from domain import CatalogVideo
from tests.fakes import FakeFetcher, FakePlayer, ManualSpawn, RecordingLogger


@pytest.fixture
def player():
    return FakePlayer()


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def spawn():
    return ManualSpawn()


@pytest.fixture
def video_a():
    return CatalogVideo(id=1, title="Keynote", media_locator="http://media/a.mp4", catalog_duration_seconds=185.4)


@pytest.fixture
def video_b():
    return CatalogVideo(id=2, title="Demo", media_locator="http://media/b.mp4", catalog_duration_seconds=60.0)

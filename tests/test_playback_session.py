import pytest

from application.playback_session import PlaybackSession
from application.video_search_service import VideoSearchService
from domain import PlaybackSource, SearchHit


class StubSearchClient:
    def __init__(self, hits):
        self.hits = hits
        self.transcribed = []

    def transcribe(self, video_id):
        self.transcribed.append(video_id)

    def search(self, video_id, query, include_frame=True, top_k=1):
        return self.hits


@pytest.fixture
def session(player, fetcher, logger, spawn):
    return PlaybackSession(player, fetcher, logger=logger, spawn=spawn)


def test_open_video_loads_remote_source(session, player, video_a):
    session.open_video(video_a)
    assert player.loaded == ["http://media/a.mp4"]
    assert session.active_source == PlaybackSource.remote("http://media/a.mp4")


def test_play_hit_waits_for_metadata_then_plays_segment(session, player, video_a):
    session.open_video(video_a)
    target = session.play_hit(SearchHit.from_raw({"start": "1:30", "end": "1:45"}))

    assert (target.start, target.end) == (90.0, 105.0)
    assert not player.playing

    player.report_metadata(185.4)
    assert player.position == 90.0
    assert player.playing

    player.report_position(105.1)
    assert not player.playing
    assert player.pause_calls == 1


def test_recovery_swaps_player_source_and_drops_segment(session, player, fetcher, spawn, video_a):
    session.open_video(video_a)
    player.report_metadata(42.0)
    session.play_hit(SearchHit.from_raw({"start": 10, "end": 20}))
    assert session.controller.segment_target == 20

    spawn.run_all()

    assert player.loaded == ["http://media/a.mp4", "/cache/full.mp4"]
    assert session.controller.segment_target is None
    assert session.active_source.is_local


def test_normalization_uses_duration_at_play_time(player, fetcher, spawn):
    from domain import CatalogVideo

    session = PlaybackSession(player, fetcher, spawn=spawn)
    session.open_video(CatalogVideo(id=5, title="live", media_locator="http://media/live.mp4"))
    hit = SearchHit.from_raw({"start": 90_000, "end": 95_000})

    # no duration known yet: bare millisecond rule
    assert session.range_for(hit).start == 90.0

    player.report_metadata(80.0)
    target = session.range_for(hit)
    assert (target.start, target.end) == (80.0, 80.0)


def test_jump_to_hit_has_no_stop_point(session, player, video_a):
    session.open_video(video_a)
    player.report_metadata(185.4)
    session.play_hit(SearchHit.from_raw({"start": 10, "end": 15}))
    session.jump_to_hit(SearchHit.from_raw({"start": 50, "end": 60}))

    player.report_position(70)
    assert player.pause_calls == 0
    assert player.position == 70


def test_search_and_play_uses_first_hit(player, fetcher, spawn, video_a):
    client = StubSearchClient([
        {"start": 30, "end": 35, "text": "best", "score": 0.9},
        {"start": 100, "end": 110, "text": "second", "score": 0.4},
    ])
    session = PlaybackSession(player, fetcher, search_service=VideoSearchService(client), spawn=spawn)
    session.open_video(video_a)
    player.report_metadata(185.4)

    hits = session.search_and_play("new features")

    assert [hit.text for hit in hits] == ["best", "second"]
    assert client.transcribed == [1]
    assert player.position == 30
    assert session.controller.segment_target == 35


def test_search_and_play_without_video(player, fetcher):
    session = PlaybackSession(player, fetcher, search_service=VideoSearchService(StubSearchClient([])))
    assert session.search_and_play("anything") == []


def test_close_releases_local_copy(session, player, fetcher, spawn, video_a):
    session.open_video(video_a)
    player.report_metadata(42.0)
    spawn.run_all()
    session.close()
    assert fetcher.released == ["/cache/full.mp4"]

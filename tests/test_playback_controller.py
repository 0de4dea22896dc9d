import math

from application.playback_controller import PlaybackController
from domain import PlaybackPhase


def make_ready(player, duration=120.0):
    player.report_metadata(duration)
    return player


def test_seek_and_play_with_metadata(player):
    make_ready(player)
    controller = PlaybackController(player)

    future = controller.seek_and_play(10, 15)

    assert future.done()
    assert player.position == 10
    assert player.playing
    assert controller.segment_target == 15
    assert controller.phase is PlaybackPhase.SEGMENT_ACTIVE


def test_pauses_once_when_target_reached(player):
    make_ready(player)
    controller = PlaybackController(player)
    controller.seek_and_play(10, 15)

    player.report_position(14.9)
    assert player.pause_calls == 0

    player.report_position(15.2)
    assert player.pause_calls == 1
    assert controller.segment_target is None
    assert controller.phase is PlaybackPhase.IDLE

    player.report_position(20)
    assert player.pause_calls == 1


def test_stop_is_rearmed_by_a_new_seek(player):
    make_ready(player)
    controller = PlaybackController(player)
    controller.seek_and_play(10, 15)
    player.report_position(15)
    controller.seek_and_play(30, 32)
    player.report_position(32.5)
    assert player.pause_calls == 2


def test_waits_for_metadata_before_seeking(player):
    controller = PlaybackController(player)

    future = controller.seek_and_play(42, 50)

    assert not future.done()
    assert controller.phase is PlaybackPhase.AWAITING_METADATA
    assert player.play_calls == 0

    player.report_metadata(100.0)

    assert future.done()
    assert player.position == 42
    assert controller.segment_target == 50
    assert player.playing


def test_newer_request_supersedes_parked_one(player):
    controller = PlaybackController(player)
    first = controller.seek_and_play(5, 6)
    second = controller.seek_and_play(20)

    player.report_metadata(100.0)

    assert first.cancelled()
    assert second.done()
    assert player.position == 20
    assert controller.segment_target is None


def test_negative_start_is_floored(player):
    make_ready(player)
    controller = PlaybackController(player)
    controller.seek_and_play(-4, 3)
    assert player.position == 0.0


def test_non_finite_end_means_no_stop_point(player):
    make_ready(player)
    controller = PlaybackController(player)
    controller.seek_and_play(10, 15)
    controller.seek_and_play(1, math.nan)
    assert controller.segment_target is None
    assert controller.phase is PlaybackPhase.PLAYING


def test_jump_clears_stale_stop_point(player):
    make_ready(player)
    controller = PlaybackController(player)
    controller.seek_and_play(10, 15)

    controller.jump_to(40)
    player.report_position(41)

    assert controller.segment_target is None
    assert player.pause_calls == 0
    assert player.position == 41


def test_rejected_playback_keeps_the_seek(player, logger):
    make_ready(player)
    player.reject_play = True
    controller = PlaybackController(player, logger)

    future = controller.seek_and_play(12, 18)

    assert future.done() and future.exception() is None
    assert player.position == 12
    assert controller.segment_target == 18
    assert logger.levels() == ["warning"]


def test_reset_drops_target_but_keeps_parked_seek(player):
    controller = PlaybackController(player)
    future = controller.seek_and_play(8, 9)
    controller.reset()
    assert controller.phase is PlaybackPhase.AWAITING_METADATA

    player.report_metadata(30.0)
    assert future.done()
    assert player.position == 8


def test_reset_during_segment(player):
    make_ready(player)
    controller = PlaybackController(player)
    controller.seek_and_play(10, 15)
    controller.reset()
    player.report_position(16)
    assert player.pause_calls == 0


def test_close_unsubscribes_and_cancels(player):
    controller = PlaybackController(player)
    future = controller.seek_and_play(3, 4)
    controller.close()
    assert future.cancelled()
    player.report_metadata(10.0)
    assert player.play_calls == 0

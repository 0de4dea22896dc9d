from infrastructure.logging import ConsoleLogger


def test_levels_are_prefixed(capsys):
    logger = ConsoleLogger()
    logger.info("opened")
    logger.warning("slow")
    logger.error("failed")
    assert capsys.readouterr().out.splitlines() == ["opened", "⚠️ slow", "❌ failed"]


def test_logger_exposes_only_the_three_levels():
    assert not hasattr(ConsoleLogger(), "debug")

import io

from pokearena.core.logging import Logger


def test_messages_below_threshold_are_dropped():
    out = io.StringIO()
    log = Logger("WARN", stream=out)
    log.debug("Hidden")
    log.info("AlsoHidden")
    log.warn("Shown", attempt=2)
    log.error("Failed")
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert "[WARN] Shown attempt=2" in lines[0]
    assert "[ERROR] Failed" in lines[1]


def test_set_level_lowers_and_raises_threshold():
    out = io.StringIO()
    log = Logger("ERROR", stream=out)
    log.info("Before")
    log.set_level("DEBUG")
    log.debug("After")
    assert "Before" not in out.getvalue()
    assert "[DEBUG] After" in out.getvalue()


def test_unknown_level_falls_back_to_info():
    out = io.StringIO()
    log = Logger("DEBUG", stream=out)
    log.set_level("LOUD")
    log.debug("Quiet")
    log.info("Loud")
    assert "Quiet" not in out.getvalue()
    assert "Loud" in out.getvalue()


def test_default_stream_is_stderr(capsys):
    Logger("INFO").info("ToStderr", key="value")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ToStderr key=value" in captured.err

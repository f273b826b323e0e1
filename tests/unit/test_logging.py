import logging

from infrastructure.observability import configure_logging, make_session_tag, set_log_context


def test_session_tag_is_stable_and_short() -> None:
    assert make_session_tag("20240501_120000_1") == make_session_tag("20240501_120000_1")
    assert len(make_session_tag("abc")) == 8
    assert make_session_tag("abc") != make_session_tag("abd")


def test_context_is_injected_into_records(tmp_path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(log_file=log_file, console_level=logging.WARNING)
    set_log_context(session_id_full="s-1", command="match")

    logging.getLogger("test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert f"s={make_session_tag('s-1')} c=match | hello" in text

import pytest

from quillpad.session_statistics import (
    ACTIVE_INTERVAL_MS,
    IDLE_INTERVAL_MS,
    WORDS_PER_PAGE,
    SessionStatistics,
)


@pytest.fixture
def stats():
    return SessionStatistics()


def _record(signal):
    values = []
    signal.connect(values.append)
    return values


def test_new_session_emits_reset_values(stats):
    words = _record(stats.word_count_changed)
    pages = _record(stats.page_count_changed)
    wpm = _record(stats.words_per_minute_changed)
    time = _record(stats.writing_time_changed)
    idle = _record(stats.idle_time_percentage_changed)
    stats.on_document_word_count_changed(30)
    stats.start_new_session(30)
    assert stats.word_count == 0
    assert (words[-1], pages[-1], wpm[-1], time[-1], idle[-1]) == (0, 0, 0, 0, 100)


def test_words_are_counted_from_initial_count(stats):
    stats.start_new_session(100)
    stats.on_document_word_count_changed(140)
    assert stats.word_count == 40


def test_page_count_uses_words_per_page(stats):
    pages = _record(stats.page_count_changed)
    stats.on_document_word_count_changed(WORDS_PER_PAGE)
    assert pages[-1] == 1
    stats.on_document_word_count_changed(WORDS_PER_PAGE - 1)
    assert pages[-1] == 0


def test_deleting_words_never_goes_below_zero(stats):
    stats.start_new_session(50)
    words = _record(stats.word_count_changed)
    stats.on_document_word_count_changed(10)
    assert stats.word_count == 0
    assert words == [0]


def test_idle_tick_reports_full_idle_and_words_as_pace(stats):
    wpm = _record(stats.words_per_minute_changed)
    idle = _record(stats.idle_time_percentage_changed)
    stats.on_document_word_count_changed(12)
    stats.tick()
    assert idle[-1] == 100
    assert wpm[-1] == 12
    assert stats.timer_interval_ms == ACTIVE_INTERVAL_MS


def test_active_typing_reports_no_idle_time(stats):
    idle = _record(stats.idle_time_percentage_changed)
    wpm = _record(stats.words_per_minute_changed)
    stats.on_typing_resumed()
    stats.on_document_word_count_changed(10)
    stats.tick()
    assert idle[-1] == 0
    assert wpm[-1] == 600


def test_no_words_keeps_short_interval(stats):
    stats.on_typing_resumed()
    stats.tick()
    assert stats.timer_interval_ms == IDLE_INTERVAL_MS


def test_writing_time_counts_whole_minutes(stats):
    time = _record(stats.writing_time_changed)
    for _ in range(59):
        stats.tick()
    assert time[-1] == 0
    stats.tick()
    assert time[-1] == 1


def test_pause_after_resume_marks_idle(stats):
    stats.on_typing_resumed()
    stats.on_typing_paused()
    assert stats.idle is True
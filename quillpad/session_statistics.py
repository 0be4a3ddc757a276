"""Statistics for the current writing session."""

from __future__ import annotations

from quillpad.observer import Signal

WORDS_PER_PAGE = 250
IDLE_INTERVAL_MS = 1000
ACTIVE_INTERVAL_MS = 5000


class SessionStatistics:
    """Tracks words written, pace and idle time during a writing session.

    Time is driven by calling :meth:`tick` whenever ``timer_interval_ms``
    milliseconds have elapsed; the interval lengthens once the writer has
    a non-zero pace.
    """

    def __init__(self) -> None:
        self.word_count_changed = Signal()
        self.page_count_changed = Signal()
        self.words_per_minute_changed = Signal()
        self.writing_time_changed = Signal()
        self.idle_time_percentage_changed = Signal()
        self.timer_interval_ms = IDLE_INTERVAL_MS
        self.idle = True
        self._session_word_count = 0
        self._total_words_written = 0
        self._last_word_count = 0
        self._total_seconds = 0
        self._idle_seconds = 0
        self.start_new_session(0)

    @property
    def word_count(self) -> int:
        """Words added to the document during this session, never below zero."""
        return self._session_word_count

    def start_new_session(self, initial_word_count: int = 0) -> None:
        """Reset all statistics, counting from the given document word count."""
        self._session_word_count = 0
        self._total_words_written = 0
        self._last_word_count = initial_word_count
        self._total_seconds = 0
        self._idle_seconds = 0
        self.idle = True

        self.word_count_changed.emit(0)
        self.page_count_changed.emit(0)
        self.words_per_minute_changed.emit(0)
        self.writing_time_changed.emit(0)
        self.idle_time_percentage_changed.emit(100)

    def on_document_word_count_changed(self, new_word_count: int) -> None:
        """Record a new document word count."""
        delta = new_word_count - self._last_word_count
        if delta > 0:
            self._total_words_written += delta

        self._session_word_count = max(0, self._session_word_count + delta)
        self._last_word_count = new_word_count

        self.word_count_changed.emit(self._session_word_count)
        self.page_count_changed.emit(self._session_word_count // WORDS_PER_PAGE)

    def on_typing_paused(self) -> None:
        self.idle = True

    def on_typing_resumed(self) -> None:
        self.idle = False

    def tick(self) -> None:
        """Account for one elapsed timer interval and publish the new figures."""
        elapsed = self.timer_interval_ms // 1000
        self._total_seconds += elapsed
        if self.idle:
            self._idle_seconds += elapsed

        wpm = self._words_per_minute()
        self.words_per_minute_changed.emit(wpm)
        self.writing_time_changed.emit(self._total_seconds // 60)
        if self._total_seconds > 0:
            idle_percentage = int(self._idle_seconds / self._total_seconds * 100.0)
        else:
            idle_percentage = 100
        self.idle_time_percentage_changed.emit(idle_percentage)

        self.timer_interval_ms = ACTIVE_INTERVAL_MS if wpm > 0 else IDLE_INTERVAL_MS

    def _words_per_minute(self) -> int:
        active = self._total_seconds - self._idle_seconds
        if active > 0:
            return int(self._total_words_written * 60.0 / active)
        return self._total_words_written
"""A selectable status-bar indicator showing one document or session statistic."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from quillpad.observer import Signal
from quillpad.session_statistics import SessionStatistics


def _count(value: int, singular: str, plural: str, suffix: str = "") -> str:
    noun = singular if value == 1 else plural
    return f"{value:,} {noun}{suffix}"


def word_count_text(value: int) -> str:
    return _count(value, "word", "words")


def character_count_text(value: int) -> str:
    return _count(value, "character", "characters")


def sentence_count_text(value: int) -> str:
    return _count(value, "sentence", "sentences")


def paragraph_count_text(value: int) -> str:
    return _count(value, "paragraph", "paragraphs")


def page_count_text(value: int) -> str:
    return _count(value, "page", "pages")


def words_added_text(value: int) -> str:
    return _count(value, "word", "words", " added")


def wpm_text(value: int) -> str:
    return f"{value:,} wpm"


def _hours_minutes(minutes: int) -> str:
    hours = abs(minutes) // 60 * (-1 if minutes < 0 else 1)
    remainder = minutes - hours * 60
    return f"{hours:02d}:{remainder:02d}"


def read_time_text(minutes: int) -> str:
    return f"{_hours_minutes(minutes)} read time"


def write_time_text(minutes: int) -> str:
    return f"{_hours_minutes(minutes)} write time"


class Statistic(Enum):
    """The statistics the indicator can show, in display order."""

    WORDS = (word_count_text,)
    CHARACTERS = (character_count_text,)
    SENTENCES = (sentence_count_text,)
    PARAGRAPHS = (paragraph_count_text,)
    PAGES = (page_count_text,)
    READ_TIME = (read_time_text,)
    WORDS_ADDED = (words_added_text,)
    WPM = (wpm_text,)
    WRITE_TIME = (write_time_text,)

    @property
    def formatter(self) -> Callable[[int], str]:
        return self.value[0]


class StatisticsIndicator:
    """Holds the text of every statistic and which one is currently shown."""

    def __init__(self, current: Statistic = Statistic.WORDS) -> None:
        self._texts = {stat: stat.formatter(0) for stat in Statistic}
        self._current = current
        self.current_text_changed = Signal()

    @property
    def current(self) -> Statistic:
        return self._current

    @current.setter
    def current(self, statistic: Statistic) -> None:
        self._current = statistic
        self.current_text_changed.emit(self.current_text)

    @property
    def current_text(self) -> str:
        return self._texts[self._current]

    @property
    def minimum_contents_length(self) -> int:
        """Number of characters the shown item needs."""
        return len(self.current_text)

    def items(self) -> list[str]:
        """All item texts in display order."""
        return [self._texts[stat] for stat in Statistic]

    def set_value(self, statistic: Statistic, value: int) -> None:
        """Update the text of one statistic."""
        self._texts[statistic] = statistic.formatter(value)
        if statistic is self._current:
            self.current_text_changed.emit(self.current_text)

    def item_text(self, statistic: Statistic) -> str:
        return self._texts[statistic]

    def attach_session(self, session: SessionStatistics) -> None:
        """Follow the session's words added, pace and writing time."""
        session.word_count_changed.connect(
            lambda value: self.set_value(Statistic.WORDS_ADDED, value)
        )
        session.words_per_minute_changed.connect(
            lambda value: self.set_value(Statistic.WPM, value)
        )
        session.writing_time_changed.connect(
            lambda value: self.set_value(Statistic.WRITE_TIME, value)
        )
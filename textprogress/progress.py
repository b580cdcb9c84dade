"""Progress indicator functionality."""

import logging
import sys
import time
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO, TypeVar

from .constants import ERASE_CHAR, REMAINING_TIME_PLACEHOLDER
from .timefmt import format_duration, format_elapsed_seconds
from .validation import InvalidArgument, validate_options, validate_total

T = TypeVar('T')


class ProgressIndicator:
    """Single-line progress bar that redraws its trailing segments in place.

    The line is rendered once on construction and updated by ``advance``.
    Segments are erased with backspaces, so nothing else may write to the
    same stream until the indicator has finished.
    """

    def __init__(self, total: int, *, stream: Optional[TextIO] = None,
                 clock: Optional[Callable[[], float]] = None, **options: Any):
        """Initialize the indicator and render the empty line.

        Args:
            total: Number of steps representing completion
            stream: Output stream (defaults to sys.stdout)
            clock: Callable returning seconds (defaults to time.monotonic)
            **options: Display options, see constants.DEFAULT_OPTIONS

        Raises:
            InvalidArgument: If total or an option is invalid
        """
        self.total = validate_total(total)
        settings = validate_options(options)
        self.bar_length = settings['bar_length']
        self.update_step = settings['update_step']
        self.start_message = settings['start_message']
        self.end_message = settings['end_message']
        self.show_bar = settings['show_bar']
        self.show_percentage = settings['show_percentage']
        self.show_actual_num = settings['show_actual_num']
        self.show_remaining_time = settings['show_remaining_time']
        self.show_final_time = settings['show_final_time']
        self.bar_symbol = settings['bar_symbol']
        self.empty_bar_symbol = settings['empty_bar_symbol']

        self.stream = stream if stream is not None else sys.stdout
        self.clock = clock or time.monotonic

        self.next_render = min(self.update_step, self.total)
        self.bars_printed = 0
        self.finished = False
        self._bar = [self.empty_bar_symbol] * self.bar_length
        self._actual_num_format = f' %{len(str(self.total))}d/{self.total}'

        self.actual_num_text = self._format_actual_num(0)
        self.percentage_text = self._format_percentage(0)
        self.remaining_time_text = REMAINING_TIME_PLACEHOLDER

        logging.debug(f"Progress indicator created for {self.total} steps")
        self.start_time = self.clock()
        self._render_initial()

    @property
    def bar_text(self) -> str:
        return '[' + ''.join(self._bar) + ']'

    def _format_actual_num(self, current: int) -> str:
        return self._actual_num_format % current

    def _format_percentage(self, current: int) -> str:
        return ' %3d%%' % (current * 100 // self.total)

    def _format_remaining_time(self, current: int) -> str:
        if current == 0:
            return REMAINING_TIME_PLACEHOLDER
        elapsed = self.clock() - self.start_time
        return format_duration(elapsed * (self.total - current) / current)

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _erase(self, text: str) -> None:
        """Erase text previously written at the end of the line.

        Backspace only moves the cursor, so the characters are blanked and
        the cursor is moved back again before anything is redrawn.
        """
        back = ERASE_CHAR * len(text)
        self._write(back + ' ' * len(text) + back)

    def _render_initial(self) -> None:
        self._write(self.start_message)
        if self.show_bar:
            self._write(self.bar_text)
        if self.show_actual_num:
            self._write(self.actual_num_text)
        if self.show_percentage:
            self._write(self.percentage_text)
        if self.show_remaining_time:
            self._write(self.remaining_time_text)

    def _update_bar(self, current: int) -> None:
        bars = current * self.bar_length // self.total
        if bars <= self.bars_printed:
            return
        if self.show_bar:
            self._erase(self.bar_text)
            for position in range(self.bars_printed, bars):
                self._bar[position] = self.bar_symbol
            self._write(self.bar_text)
        self.bars_printed = bars

    def _finish(self) -> None:
        self._write(self.end_message)
        if self.show_final_time:
            self._write(format_elapsed_seconds(self.clock() - self.start_time))
        self._write('\n')
        self.finished = True
        logging.debug(f"Progress indicator finished after {self.total} steps")

    def advance(self, current: int) -> None:
        """Report that ``current`` steps out of ``total`` are complete.

        Calls below the render threshold, and every call after completion,
        leave the line untouched.

        Raises:
            InvalidArgument: If current is not an integer in [0, total]
        """
        if isinstance(current, bool) or not isinstance(current, int) or not 0 <= current <= self.total:
            raise InvalidArgument(
                f"Invalid value for 'current': expected an integer in [0, {self.total}], got {current!r}"
            )
        if self.finished or current < self.next_render:
            return

        self.next_render = min(self.next_render + self.update_step, self.total)

        # Erase in reverse display order
        if self.show_remaining_time:
            self._erase(self.remaining_time_text)
        if self.show_percentage:
            self._erase(self.percentage_text)
        if self.show_actual_num:
            self._erase(self.actual_num_text)

        self._update_bar(current)

        if current >= self.total:
            self._finish()
            return

        if self.show_actual_num:
            self.actual_num_text = self._format_actual_num(current)
            self._write(self.actual_num_text)
        if self.show_percentage:
            self.percentage_text = self._format_percentage(current)
            self._write(self.percentage_text)
        if self.show_remaining_time:
            self.remaining_time_text = self._format_remaining_time(current)
            self._write(self.remaining_time_text)


def create(total: int, **options: Any) -> ProgressIndicator:
    """Create a progress indicator for ``total`` steps and render it."""
    return ProgressIndicator(total, **options)


def track(iterable: Iterable[T], total: Optional[int] = None, **options: Any) -> Iterator[T]:
    """Yield items from iterable, advancing a progress indicator after each one.

    Args:
        iterable: Items to iterate over
        total: Number of items (defaults to len(iterable))
        **options: Passed on to ProgressIndicator

    Raises:
        InvalidArgument: If total is not given and iterable has no length
    """
    if total is None:
        try:
            total = len(iterable)  # type: ignore[arg-type]
        except TypeError:
            raise InvalidArgument("Invalid value for 'total': iterable has no length, pass total explicitly")
    indicator = ProgressIndicator(total, **options)
    for count, item in enumerate(iterable, start=1):
        yield item
        indicator.advance(min(count, indicator.total))

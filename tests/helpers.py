"""Shared helpers for progress indicator tests."""
import re


class FakeClock:
    """Clock returning a settable time in seconds."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def visible(output):
    """Return the text a terminal shows after receiving output.

    Backspace moves the cursor left and later characters overwrite what is
    under the cursor. Trailing blanks of each line are dropped.
    """
    lines = []
    screen = []
    cursor = 0
    for char in output:
        if char == '\b':
            cursor = max(0, cursor - 1)
        elif char == '\n':
            lines.append(''.join(screen).rstrip(' ') + '\n')
            screen = []
            cursor = 0
        else:
            if cursor < len(screen):
                screen[cursor] = char
            else:
                screen.append(char)
            cursor += 1
    return ''.join(lines) + ''.join(screen).rstrip(' ')


def bar_contents(output):
    """Return the inside of the first bracketed bar on screen."""
    match = re.search(r'\[(.*?)\]', visible(output))
    return match.group(1) if match else None

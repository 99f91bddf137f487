import os
import sys
from collections import deque

from .controllers import InputSymbol

WINDOWS = os.name == 'nt'

if WINDOWS:
    import msvcrt
else:
    import tty
    import termios
    import select

ESC = '\x1b'

KEYMAP = {
    'a': InputSymbol.LEFT,
    'd': InputSymbol.RIGHT,
    'q': InputSymbol.QUIT,
    ESC: InputSymbol.QUIT,
    'left': InputSymbol.LEFT,
    'right': InputSymbol.RIGHT,
}

# Second byte of arrow keys: ANSI "ESC [ x" and Windows "\xe0 x"
ANSI_ARROWS = {'D': 'left', 'C': 'right'}
WINDOWS_ARROWS = {b'K': 'left', b'M': 'right'}


def key_to_symbol(key):
    if key is None:
        return InputSymbol.NONE
    if len(key) == 1:
        key = key.lower()
    return KEYMAP.get(key, InputSymbol.NONE)


class TerminalInput:
    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.old_settings = None
        if not WINDOWS:
            self.old_settings = termios.tcgetattr(self.stream)
            tty.setcbreak(self.stream.fileno())

    def restore(self):
        if not WINDOWS and self.old_settings is not None:
            termios.tcsetattr(self.stream, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    def is_pending(self):
        if WINDOWS:
            return msvcrt.kbhit()
        return bool(select.select([self.stream], [], [], 0)[0])

    def read_symbol(self):
        return key_to_symbol(self.get_key())

    def get_key(self):
        if WINDOWS:
            ch = msvcrt.getch()
            if ch in (b'\x00', b'\xe0'):
                return WINDOWS_ARROWS.get(msvcrt.getch())
            try:
                return ch.decode('utf-8')
            except UnicodeDecodeError:
                return None
        ch = self._read_char()
        if ch == ESC and self.is_pending():
            if self._read_char() == '[' and self.is_pending():
                return ANSI_ARROWS.get(self._read_char())
            return None
        return ch

    def _read_char(self):
        # Unbuffered, so select() sees the rest of an escape sequence
        return os.read(self.stream.fileno(), 1).decode('utf-8', 'ignore')

    def wait_for_key(self):
        if not WINDOWS:
            select.select([self.stream], [], [])
        return self.get_key()

    def drain(self):
        while self.is_pending():
            self.get_key()


class ScriptedInput:
    """Input device that replays a fixed sequence of symbols, one per tick.

    ``None`` entries stand for ticks with no key pressed.
    """

    def __init__(self, symbols):
        self.symbols = deque(symbols)

    def is_pending(self):
        if self.symbols and self.symbols[0] is None:
            self.symbols.popleft()
            return False
        return bool(self.symbols)

    def read_symbol(self):
        return self.symbols.popleft()


class TerminalOutput:
    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def hide_cursor(self):
        self.stream.write('\033[?25l')
        self.stream.flush()

    def show_cursor(self):
        self.stream.write('\033[?25h')
        self.stream.flush()

    def clear(self):
        os.system('cls' if WINDOWS else 'clear')

    def write_frame(self, frame):
        self.stream.write('\033[H')
        self.stream.write(frame)
        self.stream.flush()

    def write_line(self, text=""):
        self.stream.write(text + "\n")
        self.stream.flush()

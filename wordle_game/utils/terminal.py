"""
Terminal Input/Output

Wraps the line-based input and output streams of an interactive session and
renders feedback either as plain symbols or as coloured letters.
"""

import sys
from typing import Dict, Optional, TextIO

from ..models.game import Feedback, LetterVerdict


class Ansi:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    BLINK = "\033[5m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"


PLAIN_SYMBOLS: Dict[LetterVerdict, str] = {
    LetterVerdict.CORRECT: "G",
    LetterVerdict.PRESENT: "Y",
    LetterVerdict.ABSENT: "R",
}

VERDICT_COLORS: Dict[LetterVerdict, str] = {
    LetterVerdict.CORRECT: Ansi.GREEN,
    LetterVerdict.PRESENT: Ansi.YELLOW,
    LetterVerdict.ABSENT: Ansi.RED,
}


def style(text: str, *codes: str) -> str:
    return "".join(codes) + text + Ansi.RESET


def render_plain(feedback: Feedback) -> str:
    return "".join(PLAIN_SYMBOLS[verdict] for verdict in feedback.verdicts)


def render_colored(feedback: Feedback) -> str:
    return "".join(
        style(letter, VERDICT_COLORS[verdict])
        for letter, verdict in zip(feedback.guess, feedback.verdicts)
    )


class Console:
    """
    Line-oriented terminal used by the session driver.

    Reading past the end of the input raises EOFError so the driver can
    close the session cleanly.
    """

    def __init__(self,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 is_tty: Optional[bool] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        if is_tty is None:
            isatty = getattr(self.stdout, 'isatty', None)
            is_tty = bool(isatty and isatty())
        self.is_tty = is_tty

    def write(self, message: str = "") -> None:
        print(message, file=self.stdout)

    def read_line(self, prompt: Optional[str] = None) -> str:
        if prompt is not None:
            self.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("No more input")
        return line.rstrip("\r\n")

    def render(self, feedback: Feedback) -> str:
        return render_colored(feedback) if self.is_tty else render_plain(feedback)

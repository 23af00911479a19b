# little_kai/console_style.py
"""ANSI styling for the console UI. Plain text when stdout is not a terminal."""

import sys

RESET = "\033[0m"


def _paint(code: str, text: str) -> str:
    if not sys.stdout.isatty():
        return text
    return f"\033[{code}m{text}{RESET}"


def bold(text: str) -> str:
    return _paint("1", text)


def cyan(text: str) -> str:
    return _paint("96", text)


def green(text: str) -> str:
    return _paint("92", text)


def red(text: str) -> str:
    return _paint("91", text)


def yellow(text: str) -> str:
    return _paint("93", text)


def banner(title: str, char: str = "#") -> str:
    width = len(title) + 4
    line = char * width
    return f"{line}\n{title.center(width)}\n{line}"

"""
Turns a raw terminal line into a known command or an "unknown" result.

Unknown input is a normal outcome, not an error: it carries the closest known
command when one is near enough to be a plausible typo.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Union


class Command(str, Enum):
    # Order matters: ties in closest_command go to the earlier entry.
    HELP = "help"
    ABOUTME = "aboutme"
    SKILLS = "skills"
    SKILL = "skill"
    PROJECTS = "projects"
    PROJECT = "project"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    RESUME = "resume"
    CONTACT = "contact"
    ASK = "ask"
    COFFEE = "coffee"
    CAT = "cat"
    CLEAR = "clear"


KNOWN_COMMANDS: tuple[str, ...] = tuple(c.value for c in Command)

# Inputs this short match too many commands at distance 2
_SHORT_INPUT_LENGTH = 4
_SHORT_MAX_DISTANCE = 1
_LONG_MAX_DISTANCE = 2

_ASK_RE = re.compile(r'^ask\s+"([^"]*)"$', re.IGNORECASE | re.DOTALL)


@dataclass
class ParsedLine:
    command: Command
    args: list[str] = field(default_factory=list)
    raw: str = ""


@dataclass
class UnknownCommand:
    name: str
    suggestion: Optional[str] = None


@dataclass
class EmptyLine:
    pass


def edit_distance(source: str, target: str) -> int:
    """Levenshtein distance; insert, delete and substitute all cost 1."""
    previous = list(range(len(target) + 1))
    for i, s_char in enumerate(source, start=1):
        current = [i] + [0] * len(target)
        for j, t_char in enumerate(target, start=1):
            cost = 0 if s_char == t_char else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
        previous = current
    return previous[len(target)]


def closest_command(name: str, commands: Iterable[str] = KNOWN_COMMANDS) -> Optional[str]:
    """Nearest known command, or None when nothing is within the threshold.

    Threshold: distance ≤ 1 for inputs of up to 4 characters, ≤ 2 otherwise.
    The first command at the minimum distance wins.
    """
    name = name.lower()
    max_distance = _SHORT_MAX_DISTANCE if len(name) <= _SHORT_INPUT_LENGTH else _LONG_MAX_DISTANCE

    best: Optional[str] = None
    best_distance = None
    for command in commands:
        distance = edit_distance(name, command)
        if best_distance is None or distance < best_distance:
            best, best_distance = command, distance

    if best is None or best_distance > max_distance:
        return None
    return best


def parse_line(raw: str) -> Union[ParsedLine, UnknownCommand, EmptyLine]:
    """Split a line into (command, args), lowercased and whitespace-separated.

    `raw` on the result keeps the trimmed original casing for commands, like
    `ask`, whose argument is free text.
    """
    stripped = raw.strip()
    if not stripped:
        return EmptyLine()

    name, *args = stripped.lower().split()
    try:
        command = Command(name)
    except ValueError:
        return UnknownCommand(name=name, suggestion=closest_command(name))
    return ParsedLine(command=command, args=args, raw=stripped)


def quoted_question(line: ParsedLine) -> Optional[str]:
    """The text between double quotes in `ask "<question>"`, stripped; None if absent."""
    match = _ASK_RE.match(line.raw)
    if not match:
        return None
    question = match.group(1).strip()
    return question or None

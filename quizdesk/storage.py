"""Text files holding one question or player record per line."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from quizdesk.records import Player, Question, RecordFormatError

T = TypeVar("T")


def _read_lines(path: str | os.PathLike[str]) -> list[str]:
    try:
        with open(path, encoding="utf-8") as fh:
            return fh.readlines()
    except FileNotFoundError:
        return []


def _parse_all(path: str | os.PathLike[str], parse: Callable[[str], T]) -> list[T]:
    records = []
    for line in _read_lines(path):
        try:
            records.append(parse(line))
        except RecordFormatError:
            continue
    return records


def _append(path: str | os.PathLike[str], line: str) -> None:
    with open(path, "a", encoding="utf-8") as fh:
        fh.write(line + "\n")


def _remove_where(
    path: str | os.PathLike[str],
    parse: Callable[[str], T],
    matches: Callable[[T], bool],
) -> int:
    """Rewrite the file without matching records; unreadable lines are dropped too."""
    kept: list[str] = []
    removed = 0
    for line in _read_lines(path):
        try:
            record = parse(line)
        except RecordFormatError:
            continue
        if matches(record):
            removed += 1
        else:
            kept.append(line)

    target = Path(path)
    fd, temp_name = tempfile.mkstemp(dir=target.parent or ".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.writelines(kept)
        os.replace(temp_name, target)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise
    return removed


def load_questions(path: str | os.PathLike[str]) -> list[Question]:
    """Read every well-formed question from the file; a missing file holds none."""
    return _parse_all(path, Question.from_line)


def load_players(path: str | os.PathLike[str]) -> list[Player]:
    """Read every well-formed player from the file; a missing file holds none."""
    return _parse_all(path, Player.from_line)


def append_question(path: str | os.PathLike[str], question: Question) -> None:
    """Add a question at the end of the file."""
    _append(path, question.to_line())


def append_player(path: str | os.PathLike[str], player: Player) -> None:
    """Add a player at the end of the file."""
    _append(path, player.to_line())


def remove_question(path: str | os.PathLike[str], number: int) -> int:
    """Delete every question with this number; return how many were removed."""
    return _remove_where(path, Question.from_line, lambda q: q.number == number)


def remove_player(path: str | os.PathLike[str], name: str) -> int:
    """Delete every player with this pseudonym; return how many were removed."""
    return _remove_where(path, Player.from_line, lambda p: p.pseudonym == name)
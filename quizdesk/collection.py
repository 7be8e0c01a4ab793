"""Operations on lists of questions and players."""

from __future__ import annotations

from collections.abc import Iterable

from quizdesk.records import Player, Question

EMPTY_MESSAGE = "La liste est vide! Rien a afficher."


def sort_by_games(players: Iterable[Player]) -> list[Player]:
    """Return the players in ascending order of games played, ties kept in order."""
    return sorted(players, key=lambda player: player.games)


def sort_by_score(players: Iterable[Player]) -> list[Player]:
    """Return the players in ascending order of total score, ties kept in order."""
    return sorted(players, key=lambda player: player.score)


def split_by_difficulty(
    questions: Iterable[Question],
) -> tuple[list[Question], list[Question], list[Question]]:
    """Split questions into easy, medium and the rest, keeping their order."""
    easy: list[Question] = []
    medium: list[Question] = []
    hard: list[Question] = []
    for question in questions:
        if question.difficulty == "Easy":
            easy.append(question)
        elif question.difficulty == "Medium":
            medium.append(question)
        else:
            hard.append(question)
    return easy, medium, hard


def find_question(
    questions: Iterable[Question], domain: str, difficulty: str
) -> Question | None:
    """Return the first question of the given domain and difficulty, or None."""
    return next(
        (q for q in questions if q.domain == domain and q.difficulty == difficulty),
        None,
    )


def format_questions(questions: Iterable[Question]) -> str:
    """Describe every question, separated by blank lines."""
    blocks = [question.describe() for question in questions]
    return "\n\n".join(blocks) if blocks else EMPTY_MESSAGE


def format_players(players: Iterable[Player]) -> str:
    """Describe every player, separated by blank lines."""
    blocks = [player.describe() for player in players]
    return "\n\n".join(blocks) if blocks else EMPTY_MESSAGE
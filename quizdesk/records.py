"""Question and player records, and the one-line text form they are stored in."""

from __future__ import annotations

from dataclasses import dataclass, field


class RecordFormatError(ValueError):
    """Raised when a line or a field does not make a well-formed record."""


def _take_fields(line: str, count: int, kind: str) -> list[str]:
    parts = line.split()
    if len(parts) < count:
        raise RecordFormatError(
            f"a {kind} record needs {count} fields, got {len(parts)}: {line!r}"
        )
    return parts[:count]


def _to_int(token: str, name: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise RecordFormatError(f"{name} must be an integer, got {token!r}") from None


def _join_fields(values: list[str]) -> str:
    for value in values:
        if not value or any(ch.isspace() for ch in value):
            raise RecordFormatError(
                f"field {value!r} must be a single word without whitespace"
            )
    return " ".join(values)


@dataclass(frozen=True)
class Question:
    """A quiz question: number, domain, difficulty, content and answer."""

    number: int
    domain: str
    difficulty: str
    content: str
    answer: str

    @classmethod
    def from_line(cls, line: str) -> Question:
        """Parse 'number domain difficulty content answer'; extra words are ignored."""
        number, domain, difficulty, content, answer = _take_fields(line, 5, "question")
        return cls(_to_int(number, "question number"), domain, difficulty, content, answer)

    def to_line(self) -> str:
        """Return the record as one line of text, without the line break."""
        return _join_fields(
            [str(self.number), self.domain, self.difficulty, self.content, self.answer]
        )

    def describe(self) -> str:
        """Return a labelled, multi-line description of the question."""
        return "\n".join(
            [
                f"Numero de la question : {self.number}",
                f"Domaine : {self.domain}",
                f"Difficulte : {self.difficulty}",
                f"Contenu de la question : {self.content}",
                f"Reponse de la question : {self.answer}",
            ]
        )


@dataclass(frozen=True)
class Player:
    """A registered player with their favourite domain and running totals."""

    identifier: int
    pseudonym: str
    date: str
    domain: str
    games: int
    score: int

    @classmethod
    def from_line(cls, line: str) -> Player:
        """Parse 'identifier pseudonym date domain games score'; extra words are ignored."""
        identifier, pseudonym, date, domain, games, score = _take_fields(line, 6, "player")
        return cls(
            _to_int(identifier, "player identifier"),
            pseudonym,
            date,
            domain,
            _to_int(games, "number of games"),
            _to_int(score, "total score"),
        )

    def to_line(self) -> str:
        """Return the record as one line of text, without the line break."""
        return _join_fields(
            [
                str(self.identifier),
                self.pseudonym,
                self.date,
                self.domain,
                str(self.games),
                str(self.score),
            ]
        )

    def describe(self) -> str:
        """Return a labelled, multi-line description of the player."""
        return "\n".join(
            [
                f"Identifiant : {self.identifier}",
                f"Pseudoname : {self.pseudonym}",
                f"Date d'enregistrement : {self.date}",
                f"Domaine : {self.domain}",
                f"Nombre de parties : {self.games}",
                f"Score total : {self.score}",
            ]
        )


@dataclass
class AnsweredQuestion:
    """One question of a game, the answer given to it and the score earned."""

    question: str
    given_answer: str
    score: int


@dataclass
class Game:
    """A game played by one player at one level."""

    player_id: int
    level: int
    answers: list[AnsweredQuestion] = field(default_factory=list)
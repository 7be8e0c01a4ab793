import pytest

from quizdesk.records import AnsweredQuestion, Game, Player, Question, RecordFormatError


def test_question_from_line_reads_fields():
    q = Question.from_line("7 Science Easy What_is_H2O? water\n")
    assert q == Question(7, "Science", "Easy", "What_is_H2O?", "water")


def test_question_from_line_ignores_extra_words():
    q = Question.from_line("1 Art Hard who_painted? Monet extra words")
    assert q.answer == "Monet"
    assert q.number == 1


def test_question_round_trip():
    q = Question(12, "History", "Medium", "year_of_1789?", "revolution")
    assert Question.from_line(q.to_line()) == q


def test_question_too_few_fields():
    with pytest.raises(RecordFormatError):
        Question.from_line("3 Science Easy only_content")


def test_question_number_must_be_integer():
    with pytest.raises(RecordFormatError):
        Question.from_line("x Science Easy q a")


def test_question_to_line_rejects_whitespace_in_field():
    with pytest.raises(RecordFormatError):
        Question(1, "Science", "Easy", "two words", "a").to_line()


def test_question_describe_labels():
    text = Question(4, "Geo", "Easy", "capital?", "Paris").describe()
    lines = text.splitlines()
    assert lines[0] == "Numero de la question : 4"
    assert "Domaine : Geo" in lines
    assert lines[-1] == "Reponse de la question : Paris"


def test_player_from_line_reads_fields():
    p = Player.from_line("2 alice 2024-01-05 Science 3 40 \n")
    assert p == Player(2, "alice", "2024-01-05", "Science", 3, 40)


def test_player_round_trip():
    p = Player(9, "bob", "2023-12-31", "Art", 0, 0)
    assert Player.from_line(p.to_line()) == p


def test_player_bad_score():
    with pytest.raises(RecordFormatError):
        Player.from_line("2 alice 2024-01-05 Science 3 many")


def test_player_too_few_fields():
    with pytest.raises(RecordFormatError):
        Player.from_line("2 alice")


def test_player_describe_labels():
    lines = Player(2, "alice", "2024-01-05", "Science", 3, 40).describe().splitlines()
    assert lines[0] == "Identifiant : 2"
    assert "Date d'enregistrement : 2024-01-05" in lines
    assert lines[-1] == "Score total : 40"


def test_record_format_error_is_value_error():
    with pytest.raises(ValueError):
        Player.from_line("")


def test_game_holds_answers():
    game = Game(player_id=3, level=2)
    assert game.answers == []
    game.answers.append(AnsweredQuestion("capital?", "Paris", 1))
    assert game.answers[0].given_answer == "Paris"
from quizdesk.records import Player, Question
from quizdesk.storage import (
    append_player,
    append_question,
    load_players,
    load_questions,
    remove_player,
    remove_question,
)


def test_load_missing_file_is_empty(tmp_path):
    assert load_questions(tmp_path / "questions.txt") == []
    assert load_players(tmp_path / "player.txt") == []


def test_append_and_load_questions(tmp_path):
    path = tmp_path / "questions.txt"
    items = [Question(1, "Geo", "Easy", "a?", "a"), Question(2, "Art", "Hard", "b?", "b")]
    for q in items:
        append_question(path, q)
    assert load_questions(path) == items


def test_append_and_load_players(tmp_path):
    path = tmp_path / "player.txt"
    items = [Player(1, "ann", "2024-01-01", "Art", 2, 9), Player(2, "ben", "2024-02-01", "Geo", 0, 0)]
    for p in items:
        append_player(path, p)
    assert load_players(path) == items


def test_load_skips_malformed_lines(tmp_path):
    path = tmp_path / "player.txt"
    path.write_text("1 ann 2024-01-01 Art 2 9\n\ngarbage line\n2 ben 2024-02-01 Geo 0 0 \n")
    assert [p.pseudonym for p in load_players(path)] == ["ann", "ben"]


def test_remove_question(tmp_path):
    path = tmp_path / "questions.txt"
    for n in (1, 2, 3):
        append_question(path, Question(n, "Geo", "Easy", "q?", "a"))
    assert remove_question(path, 2) == 1
    assert [q.number for q in load_questions(path)] == [1, 3]


def test_remove_question_absent(tmp_path):
    path = tmp_path / "questions.txt"
    append_question(path, Question(1, "Geo", "Easy", "q?", "a"))
    assert remove_question(path, 99) == 0
    assert len(load_questions(path)) == 1


def test_remove_player_all_with_name(tmp_path):
    path = tmp_path / "player.txt"
    append_player(path, Player(1, "ann", "2024-01-01", "Art", 2, 9))
    append_player(path, Player(2, "ben", "2024-02-01", "Geo", 0, 0))
    append_player(path, Player(3, "ann", "2024-03-01", "Geo", 1, 1))
    assert remove_player(path, "ann") == 2
    assert [p.identifier for p in load_players(path)] == [2]


def test_remove_keeps_lines_verbatim_and_drops_malformed(tmp_path):
    path = tmp_path / "player.txt"
    path.write_text("1 ann 2024-01-01 Art 2 9 \nnot a record\n2 ben 2024-02-01 Geo 0 0 \n")
    remove_player(path, "ben")
    assert path.read_text() == "1 ann 2024-01-01 Art 2 9 \n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["player.txt"]
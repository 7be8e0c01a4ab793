# quizdesk

quizdesk is a small console tool for keeping the questions and players of a
question-and-answer game. It works on two plain text files:

- a questions file, with one question per line:
  `number domain difficulty content answer`
- a players file, with one player per line:
  `identifier pseudoname date domain games_played total_score`

Fields are separated by whitespace, so a field cannot contain a space.
Write multi-word text with underscores instead, such as `Capital_of_France?`.
The number, the identifier, the games played and the total score must be
integers. Words after the last field are ignored. Lines that do not fit the
format are skipped when the files are read.

## Installing

```
pip install .
```

## Running

```
quizdesk
```

By default the files are `questions.txt` and `player.txt` in the current
directory. Other paths can be given:

```
quizdesk --questions my_questions.txt --players my_players.txt
```

Both files are created empty if they do not exist. The tool then shows a
numbered menu:

1. List every question.
2. List every player.
3. Add a question, typed as one line. It is appended to the questions file.
4. Remove every question with a given number.
5. Add a player, typed as one line. It is appended to the players file.
6. Remove every player with a given pseudoname.
7. Split the questions into three groups: `Easy`, `Medium`, and all others.
8. Show the first question whose domain and difficulty match exactly what
   was typed.
9. Sort the players, lowest first: choice `1` sorts by games played, any
   other answer sorts by total score. Players with equal values keep their
   order.
10. Does nothing.
11. Quit. Any other answer, including one that is not a number, quits as
    well, with exit status 1.

After each add or remove, both files are read again. Removing rewrites the
file through a temporary file and drops any lines that do not fit the format.

## Using it as a library

```python
from quizdesk.storage import load_questions, load_players, append_question, remove_player
from quizdesk.collection import split_by_difficulty, sort_by_score, find_question
from quizdesk.records import Question

questions = load_questions("questions.txt")
easy, medium, hard = split_by_difficulty(questions)
ranking = sort_by_score(load_players("player.txt"))
match = find_question(questions, "Science", "Easy")  # None if nothing matches

append_question("questions.txt", Question(7, "Science", "Easy", "H2O?", "Water"))
removed = remove_player("player.txt", "alice")  # number of records removed
```

- `quizdesk.records` has the frozen dataclasses `Question` and `Player`.
  `from_line` parses one line, `to_line` writes one line and `describe`
  gives a labelled multi-line description. A bad line, a non-integer number
  or a field that is empty or holds whitespace raises `RecordFormatError`
  (a `ValueError`).
- `quizdesk.collection` has `sort_by_games`, `sort_by_score`,
  `split_by_difficulty`, `find_question`, `format_questions` and
  `format_players`.
- `quizdesk.storage` has `load_questions`, `load_players`,
  `append_question`, `append_player`, `remove_question` and `remove_player`.
  Loading a missing file gives an empty list.

## What it does not do

There is no game to play. Menu option 10 does nothing. The `Game` and
`AnsweredQuestion` dataclasses in `quizdesk.records` describe a played game
and its answers, but nothing creates, scores or stores them, and players'
games played and total scores change only when their lines are edited.
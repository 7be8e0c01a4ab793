"""Interactive menu for managing quiz questions and players."""

from __future__ import annotations

import argparse
from pathlib import Path

from quizdesk.collection import (
    find_question,
    format_players,
    format_questions,
    sort_by_games,
    sort_by_score,
    split_by_difficulty,
)
from quizdesk.records import Player, Question, RecordFormatError
from quizdesk import storage

WIDTH = 148

MENU = """
1 - Afficher la liste des questions.
2 - Afficher la liste des joueurs.
3 - Ajouter une question.
4 - Supprimer une question.
5 - Ajouter un joueur.
6 - Supprimer un joueur.
7 - Eclater ma liste des quesitons en trois selon la difficulte.
8 - Choisir une question d'un domaine 'x' ayant un niveau de difficulte 'y'.
9 - Trier les joueurs.
10 - Lancer une partie du jeu.
11 - Quitter."""


def rule(char: str, length: int) -> str:
    """Return a horizontal rule made of one repeated character."""
    return char * length


def center_text(text: str, width: int) -> str:
    """Pad text on the left so that it sits in the middle of the given width."""
    return " " * max(0, (width - len(text)) // 2) + text


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def _ask_int(prompt: str) -> int | None:
    words = _ask(prompt).split()
    if not words:
        return None
    try:
        return int(words[0])
    except ValueError:
        return None


def _add_question(path: Path) -> None:
    print(
        "Entrez les informations sur la question "
        "'numero_qst domaine, difficulte, contenu_choixMultiples reponse' "
        "en respectant ce formmat"
    )
    try:
        storage.append_question(path, Question.from_line(_ask("> ")))
    except RecordFormatError:
        print("\n Le format saisi est incorrect ...")


def _add_player(path: Path) -> None:
    print(
        "Entrez les informations du joueur : "
        "'identifiant pseudoname date domaine nb_parties score_total' "
        "en respectant ce format "
    )
    try:
        storage.append_player(path, Player.from_line(_ask("> ")))
    except RecordFormatError:
        print("\n Le format saisi est incorrect...")


def _remove_question(path: Path) -> None:
    number = _ask_int("enter the question you want to delete \n")
    if number is None:
        print("\n Le format saisi est incorrect ...")
        return
    storage.remove_question(path, number)


def _remove_player(path: Path) -> None:
    words = _ask("enter the the_name you want to delete \n").split()
    if words:
        for _ in range(storage.remove_player(path, words[0])):
            print("removing ...")
    print("\nPlayer removed successfully!")


def _show_split(questions: list[Question]) -> None:
    easy, medium, hard = split_by_difficulty(questions)
    for title, part in (
        ("QUESTIONS FACILES", easy),
        ("QUESTIONS MOYENNES", medium),
        ("QUESTIONS DIFFICILES", hard),
    ):
        print(f"\n\n\n{title}\n")
        print(format_questions(part))


def _choose_question(questions: list[Question]) -> None:
    domain = _ask("\nEntrez le domaine : ")
    difficulty = _ask("\nEntrez la difficulte : ")
    found = find_question(questions, domain, difficulty)
    if found is None:
        print("No matching question found.")
    else:
        print("\n\n" + found.to_line())


def main(argv: list[str] | None = None) -> int:
    """Run the menu until the user leaves; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="quizdesk", description="Manage the questions and players of a quiz game."
    )
    parser.add_argument("--questions", type=Path, default=Path("questions.txt"))
    parser.add_argument("--players", type=Path, default=Path("player.txt"))
    args = parser.parse_args(argv)

    try:
        args.players.touch(exist_ok=True)
        args.questions.touch(exist_ok=True)
    except OSError:
        print("File opening failed ...")
        return 1

    print(".")
    print(rule("_", WIDTH) + "\n")
    print(center_text("Jeu de questions-reponses", WIDTH) + "\n")
    print(rule("_", WIDTH))

    questions = storage.load_questions(args.questions)
    players = storage.load_players(args.players)

    while True:
        print(rule("_", WIDTH))
        print("\n" * 5)
        print(center_text("Menu", WIDTH))
        print(MENU)
        choice = _ask_int("\nVotre choix : ")
        print("\n\n")

        if choice == 1:
            print("AFFICHER LA LISTE DES QUESTIONS\n\n")
            print(format_questions(questions))
        elif choice == 2:
            print("AFFICHER LA LISTE DES JOUEURS\n\n")
            print(format_players(players))
        elif choice in (3, 4, 5, 6):
            if choice == 3:
                _add_question(args.questions)
            elif choice == 4:
                _remove_question(args.questions)
            elif choice == 5:
                _add_player(args.players)
            else:
                _remove_player(args.players)
            questions = storage.load_questions(args.questions)
            players = storage.load_players(args.players)
            continue
        elif choice == 7:
            _show_split(questions)
        elif choice == 8:
            _choose_question(questions)
        elif choice == 9:
            print("\n1 - Trier les joueurs selon le nombre de parties jouees.")
            print("2 - Trier les joueurs selon le score total.")
            if _ask_int("\nVotre choix : ") == 1:
                players = sort_by_games(players)
            else:
                players = sort_by_score(players)
            print(format_players(players))
        elif choice == 10:
            pass
        else:
            print(rule("_", WIDTH) + "\n")
            print(center_text("FIN DU PROGRAMME", WIDTH) + "\n")
            print(rule("_", WIDTH))
            return 1

        print("\n" * 6 + "-" * 96)
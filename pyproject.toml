[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizdesk"
version = "0.1.0"
description = "Console manager for a question-and-answer game: questions, players, sorting and filtering"
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "trivia", "questions", "players", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quizdesk = "quizdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quizdesk"]

[tool.pytest.ini_options]
addopts = "-ra"

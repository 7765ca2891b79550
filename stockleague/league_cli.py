"""Line-command front end for the league registry."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Iterator

from stockleague.league import League, LeagueError

SEPARATOR = ":"
EXIT_COMMAND = "x"


def _fields(args: str, count: int) -> list[str]:
    parts = args.split(SEPARATOR)
    return (parts + [""] * count)[:count]


def _score(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid score: {text!r}") from None


def _cmd_add_team(league: League, args: str) -> Iterator[str]:
    (name,) = _fields(args, 1)
    league.add_team(name)
    yield from ()


def _cmd_add_game(league: League, args: str) -> Iterator[str]:
    name, team1, team2, score1, score2 = _fields(args, 5)
    league.add_game(name, team1, team2, _score(score1), _score(score2))
    yield from ()


def _cmd_list_games(league: League, args: str) -> Iterator[str]:
    for game in league.games():
        yield f"{game.name} {game.team1} {game.team2} {game.score1} {game.score2}"


def _cmd_search_team(league: League, args: str) -> Iterator[str]:
    (name,) = _fields(args, 1)
    team = league.team(name)
    yield f"{team.name} {team.victories}"


def _cmd_search_game(league: League, args: str) -> Iterator[str]:
    (name,) = _fields(args, 1)
    game = league.game(name)
    yield f"{game.name} {game.team1} {game.team2} {game.score1} {game.score2}"


def _cmd_remove_game(league: League, args: str) -> Iterator[str]:
    (name,) = _fields(args, 1)
    league.remove_game(name)
    yield from ()


def _cmd_change_score(league: League, args: str) -> Iterator[str]:
    name, score1, score2 = _fields(args, 3)
    new1, new2 = _score(score1), _score(score2)
    league.change_score(name, new1, new2)
    yield from ()


def _cmd_best_teams(league: League, args: str) -> Iterator[str]:
    best = league.best_teams()
    if best is None:
        return
    most, names = best
    yield f"Melhores {most}"
    for name in names:
        yield f"* {name}"


_COMMANDS: dict[str, Callable[[League, str], Iterator[str]]] = {
    "A": _cmd_add_team,
    "a": _cmd_add_game,
    "l": _cmd_list_games,
    "P": _cmd_search_team,
    "p": _cmd_search_game,
    "r": _cmd_remove_game,
    "s": _cmd_change_score,
    "g": _cmd_best_teams,
}


def execute(league: League, line: str, line_number: int) -> list[str]:
    """Run one command line and return its output lines, each prefixed by the line number.

    Unknown commands produce no output. A malformed score raises ValueError.
    """
    line = line.rstrip("\r\n")
    if not line:
        return []
    handler = _COMMANDS.get(line[0])
    if handler is None:
        return []
    args = line[2:]
    try:
        return [f"{line_number} {text}" for text in handler(league, args)]
    except LeagueError as err:
        return [f"{line_number} {err}"]


def run(lines: Iterable[str]) -> Iterator[str]:
    """Execute command lines against a fresh league, yielding output lines.

    Lines are numbered from 1; processing stops at an ``x`` command.
    """
    league = League()
    for line_number, raw in enumerate(lines, start=1):
        if raw.startswith(EXIT_COMMAND):
            return
        yield from execute(league, raw, line_number)


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input and print the results."""
    for output in run(sys.stdin):
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Teams and games of a league, with victory counts kept up to date."""

from __future__ import annotations

from dataclasses import dataclass


class LeagueError(Exception):
    """Raised when a league operation refers to a missing or duplicate entry."""


@dataclass
class Team:
    """A team and the number of games it has won."""

    name: str
    victories: int = 0


@dataclass
class Game:
    """A game between two teams and its score."""

    name: str
    team1: str
    team2: str
    score1: int
    score2: int

    def winner(self) -> str | None:
        """Name of the winning team, or None for a tie."""
        if self.score1 > self.score2:
            return self.team1
        if self.score2 > self.score1:
            return self.team2
        return None


class League:
    """Registry of teams and games; games are kept in the order they were added."""

    def __init__(self) -> None:
        self._teams: dict[str, Team] = {}
        self._games: dict[str, Game] = {}

    def add_team(self, name: str) -> Team:
        if name in self._teams:
            raise LeagueError("Equipa existente.")
        team = Team(name)
        self._teams[name] = team
        return team

    def team(self, name: str) -> Team:
        try:
            return self._teams[name]
        except KeyError:
            raise LeagueError("Equipa inexistente.") from None

    def game(self, name: str) -> Game:
        try:
            return self._games[name]
        except KeyError:
            raise LeagueError("Jogo inexistente.") from None

    def _credit(self, winner: str | None, amount: int) -> None:
        if winner is not None:
            self._teams[winner].victories += amount

    def add_game(
        self, name: str, team1: str, team2: str, score1: int, score2: int
    ) -> Game:
        if name in self._games:
            raise LeagueError("Jogo existente.")
        if team1 not in self._teams or team2 not in self._teams:
            raise LeagueError("Equipa inexistente.")
        game = Game(name, team1, team2, score1, score2)
        self._games[name] = game
        self._credit(game.winner(), 1)
        return game

    def remove_game(self, name: str) -> None:
        game = self.game(name)
        self._credit(game.winner(), -1)
        del self._games[name]

    def change_score(self, name: str, score1: int, score2: int) -> None:
        game = self.game(name)
        old_winner = game.winner()
        game.score1 = score1
        game.score2 = score2
        new_winner = game.winner()
        if old_winner != new_winner:
            self._credit(old_winner, -1)
            self._credit(new_winner, 1)

    def games(self) -> list[Game]:
        """All games in the order they were added."""
        return list(self._games.values())

    def best_teams(self) -> tuple[int, list[str]] | None:
        """Most victories and the names holding it, sorted; None without teams."""
        if not self._teams:
            return None
        most = max(team.victories for team in self._teams.values())
        names = sorted(t.name for t in self._teams.values() if t.victories == most)
        return most, names
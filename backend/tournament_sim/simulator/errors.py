"""
Errors raised by the tournament simulation core.

Any of these aborts the whole run; there is no partial recovery.
"""


class TournamentError(Exception):
    """Base class for data-integrity errors in a simulation run."""
    pass


class MalformedRecord(TournamentError):
    """Raised when a result string does not parse into two integers."""
    pass


class UnknownTeam(TournamentError):
    """Raised when a team code has no ranking or group entry."""
    pass


class InsufficientTeams(TournamentError):
    """Raised when too few qualifiers reach the knockout seeder."""
    pass

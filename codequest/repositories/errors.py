"""
Leaderboard storage errors.
BackendUnavailable (and SchemaMissing) are recovered by failover and never reach callers.
PersistenceError means no backend could serve the call and is surfaced unchanged.
"""


class LeaderboardStoreError(Exception):
    """Base class for leaderboard storage failures."""


class BackendUnavailable(LeaderboardStoreError):
    """Backend unreachable, misconfigured or rejected the operation."""


class SchemaMissing(BackendUnavailable):
    """Expected table or view does not exist."""


class PersistenceError(LeaderboardStoreError):
    """Neither backend could complete the operation."""


class MalformedStoredData(PersistenceError):
    """Leaderboard file is not a JSON array of valid quiz results."""

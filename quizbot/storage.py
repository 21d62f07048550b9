from __future__ import annotations

import asyncio
from typing import Dict, Optional

from .models import UserSession, UserStatistics


class QuizStore:
    """In-memory sessions and statistics keyed by user id, alive for the process lifetime."""

    def __init__(self) -> None:
        self.sessions: Dict[int, UserSession] = {}
        self.statistics: Dict[int, UserStatistics] = {}
        self._locks: Dict[int, asyncio.Lock] = {}

    def get_session(self, user_id: int) -> Optional[UserSession]:
        return self.sessions.get(user_id)

    def put_session(self, session: UserSession) -> None:
        self.sessions[session.user_id] = session

    def get_statistics(self, user_id: int) -> Optional[UserStatistics]:
        return self.statistics.get(user_id)

    def put_statistics(self, stats: UserStatistics) -> None:
        self.statistics[stats.user_id] = stats

    def delete_statistics(self, user_id: int) -> bool:
        return self.statistics.pop(user_id, None) is not None

    def lock_for(self, user_id: int) -> asyncio.Lock:
        """Per-user lock; chat events of one user are handled one at a time.

        Locks are never evicted, like sessions they live as long as the process.
        """
        lock = self._locks.get(user_id)
        if lock is None:
            lock = self._locks[user_id] = asyncio.Lock()
        return lock

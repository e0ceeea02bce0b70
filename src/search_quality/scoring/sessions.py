"""Per-session discriminator registry."""

from __future__ import annotations

import threading

from search_quality.config.engine import DiscriminatorConfig
from search_quality.exceptions import (
    ConfigurationError,
    SessionLimitError,
    SessionNotFoundError,
)
from search_quality.observability.logger import get_logger
from search_quality.scoring.discriminator import QualityDiscriminator

logger = get_logger("sessions")


class SessionRegistry:
    """Hands out one discriminator per session id, up to ``max_sessions``.

    Sessions are never evicted; once the registry is full, unknown ids are
    refused rather than dropping another session's history.
    """

    def __init__(self, config: DiscriminatorConfig, max_sessions: int = 1000) -> None:
        if max_sessions < 1:
            raise ConfigurationError(f"max_sessions must be >= 1, got {max_sessions}")
        self._config = config
        self._max_sessions = max_sessions
        self._sessions: dict[str, QualityDiscriminator] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get_or_create(self, session_id: str) -> QualityDiscriminator:
        with self._lock:
            discriminator = self._sessions.get(session_id)
            if discriminator is None:
                if len(self._sessions) >= self._max_sessions:
                    logger.warning(
                        "session_limit_reached",
                        session_id=session_id,
                        max_sessions=self._max_sessions,
                    )
                    raise SessionLimitError(
                        f"Session limit of {self._max_sessions} reached; "
                        f"cannot create session '{session_id}'"
                    )
                discriminator = QualityDiscriminator(self._config, session_id=session_id)
                self._sessions[session_id] = discriminator
                logger.info("session_created", session_id=session_id)
            return discriminator

    def get(self, session_id: str) -> QualityDiscriminator:
        discriminator = self._sessions.get(session_id)
        if discriminator is None:
            raise SessionNotFoundError(f"No score history for session '{session_id}'")
        return discriminator

    def items(self) -> list[tuple[str, QualityDiscriminator]]:
        with self._lock:
            return list(self._sessions.items())

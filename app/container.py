"""Dependency Injection container - initialized at app startup."""

from app.services.dashboard.service import DashboardService
from app.services.legislation.outcome import OutcomeAggregator
from app.services.voting.consensus import AffinityScorer, ConsensusClassifier
from app.services.voting.participation import ParticipationAnalyzer
from settings.logging import setup_logging


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False
    log_sinks: tuple[int, ...] = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, log_level: str | None = None) -> None:
        """Initialize all services with settings defaults. Call once at app startup.

        With a log_level the package logs go to stderr.
        """
        if log_level and not self.log_sinks:
            self.log_sinks = setup_logging(log_level)

        if self._initialized:
            return

        self.consensus = ConsensusClassifier()
        self.affinity = AffinityScorer()
        self.outcomes = OutcomeAggregator()
        self.participation = ParticipationAnalyzer()

        self.dashboard = DashboardService(
            classifier=self.consensus,
            affinity=self.affinity,
            outcomes=self.outcomes,
            participation=self.participation,
        )

        self._initialized = True


# Global container instance
container = Container()

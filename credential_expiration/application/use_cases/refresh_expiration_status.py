"""Use case for refreshing the displayed expiration status."""

import logging
from dataclasses import dataclass

from ...domain.entities import Classification, CredentialSet
from ...domain.services import Alert, ExpirationClassifier, NotificationGate, render_tooltip
from ...domain.value_objects import ExpirationThresholds
from ..ports import AlertSink, Clock, CredentialRepository, Presenter, system_clock

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RefreshResult:
    """Result of one refresh cycle."""

    credentials: CredentialSet
    classification: Classification
    tooltip: str
    alert: Alert | None
    alerts_sent: int


class RefreshExpirationStatus:
    """
    Use case for one load, classify, present and notify cycle.

    The notification gate lives across cycles so that alerts fire only when
    the aggregate state changes.
    """

    def __init__(
        self,
        credential_repository: CredentialRepository,
        presenter: Presenter,
        alert_sinks: list[AlertSink],
        thresholds: ExpirationThresholds,
        *,
        clock: Clock = system_clock,
    ) -> None:
        """
        Initialize the use case.

        Args:
            credential_repository: Adapter for loading profiles.
            presenter: Adapter showing the icon and tooltip.
            alert_sinks: Alert delivery adapters; unconfigured ones are skipped.
            thresholds: Expiration thresholds configuration.
            clock: Source of the current time.
        """
        self._repository = credential_repository
        self._presenter = presenter
        self._sinks = [s for s in alert_sinks if s.is_configured()]
        self._classifier = ExpirationClassifier(thresholds)
        self._gate = NotificationGate()
        self._clock = clock

    @property
    def thresholds(self) -> ExpirationThresholds:
        """Thresholds used for classification."""
        return self._classifier.thresholds

    @property
    def clock(self) -> Clock:
        """Source of the current time."""
        return self._clock

    async def execute(self) -> RefreshResult:
        """
        Execute one refresh cycle.

        Returns:
            RefreshResult with the loaded profiles and their classification.

        Raises:
            CredentialRepositoryError: If the profiles cannot be loaded.
            NotificationError: If an alert cannot be delivered.
        """
        credentials = self._repository.load()
        classification = self._classifier.classify(credentials, self._clock())
        logger.info(
            "Classified %d of %d profiles: %s",
            classification.reported_count,
            len(credentials),
            classification.get_summary(),
        )

        tooltip = render_tooltip(classification)
        self._presenter.set_icon(classification.aggregate_state)
        self._presenter.set_tooltip(tooltip)

        sent = 0
        alert = self._gate.evaluate(classification)
        if alert is not None:
            sent = await self._send_alert(alert)

        return RefreshResult(
            credentials=credentials,
            classification=classification,
            tooltip=tooltip,
            alert=alert,
            alerts_sent=sent,
        )

    async def _send_alert(self, alert: Alert) -> int:
        """Deliver the alert through every configured sink."""
        if not self._sinks:
            logger.warning("No alert sinks configured, dropping alert: %s", alert.message)
            return 0

        for sink in self._sinks:
            await sink.push(alert)
            logger.info("Alert sent via %s: %s", sink.__class__.__name__, alert.message)

        return len(self._sinks)

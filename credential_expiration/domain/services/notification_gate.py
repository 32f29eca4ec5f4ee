"""Edge-triggered alert decisions."""

from collections.abc import Collection
from dataclasses import dataclass

from ..entities import Classification
from ..value_objects import AggregateState

ALERT_TITLE = "Expiration"


@dataclass(frozen=True, slots=True)
class Alert:
    """A notification to deliver to the user."""

    state: AggregateState
    message: str
    title: str = ALERT_TITLE


def join_names(names: Collection[str]) -> str:
    """Join names sorted, as ``"a, b and c"``."""
    ordered = sorted(names)
    if len(ordered) <= 1:
        return "".join(ordered)
    return f"{', '.join(ordered[:-1])} and {ordered[-1]}"


def _message(names: Collection[str], singular: str, plural: str) -> str:
    suffix = plural if len(names) > 1 else singular
    return f"{join_names(names)} {suffix}"


class NotificationGate:
    """
    Decides whether a classification warrants an alert.

    An alert fires only when the aggregate state changes into EXPIRING or
    EXPIRED. Returning to CURRENT is silent but re-arms alerting.
    """

    def __init__(self, initial_state: AggregateState = AggregateState.CURRENT) -> None:
        """Initialize the gate with the state assumed before the first cycle."""
        self._previous_state = initial_state

    @property
    def previous_state(self) -> AggregateState:
        """Aggregate state seen in the last evaluated cycle."""
        return self._previous_state

    def evaluate(self, classification: Classification) -> Alert | None:
        """Record this cycle's aggregate state and return an alert if it changed."""
        state = classification.aggregate_state
        alert: Alert | None = None

        match state:
            case AggregateState.EXPIRED if self._previous_state is not AggregateState.EXPIRED:
                alert = Alert(
                    state=state,
                    message=_message(
                        classification.expired, "profile has expired", "profiles have expired"
                    ),
                )
            case AggregateState.EXPIRING if self._previous_state is not AggregateState.EXPIRING:
                alert = Alert(
                    state=state,
                    message=_message(
                        classification.expiring,
                        "profile is about to expire",
                        "profiles are about to expire",
                    ),
                )

        self._previous_state = state
        return alert

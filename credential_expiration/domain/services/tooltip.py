"""Tooltip rendering for a classification."""

from ..entities import Classification


def render_tooltip(classification: Classification) -> str:
    """
    Render the tray tooltip for a classification.

    Sections appear in the order Expired, Expiring, Current with names sorted
    within each. Expired profiles list only their name; the others show the
    time remaining. Empty sections are omitted. A blank line follows Expired
    only when Expiring is shown, and follows Expiring only when Current is
    shown.
    """
    lines: list[str] = []

    if classification.has_expired:
        lines.append("Expired")
        lines.extend(sorted(classification.expired))
        if classification.has_expiring:
            lines.append("")

    if classification.has_expiring:
        lines.append("Expiring")
        for name in sorted(classification.expiring):
            lines.append(f"{name} -> {classification.remaining(classification.expiring[name])}")
        if classification.has_current:
            lines.append("")

    if classification.has_current:
        lines.append("Current")
        for name in sorted(classification.current):
            lines.append(f"{name} -> {classification.remaining(classification.current[name])}")

    return "\n".join(lines)

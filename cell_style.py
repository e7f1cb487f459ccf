"""Display-free styling rules for a single day cell."""

from annotator import DayCellFacts

ELLIPSIS = "…"


def day_color(facts: DayCellFacts, colors: dict[str, str]) -> str:
    """Colour of the day number: today, then in-month, then other months."""
    if facts.is_today:
        return colors["today_fg"]
    if facts.is_in_reference_month:
        return colors["primary_fg"]
    return colors["other_month_fg"]


def ellipsize(text: str, font, max_width: int) -> str:
    """Trim *text* with a trailing ellipsis until it fits *max_width* pixels.

    *font* only needs a ``measure(text) -> int`` method (``tkinter.font.Font``).
    Returns ``""`` when not even the ellipsis fits.
    """
    if font.measure(text) <= max_width:
        return text
    while text and font.measure(text + ELLIPSIS) > max_width:
        text = text[:-1]
    return text + ELLIPSIS if text else ""


def tooltip_lines(facts: DayCellFacts) -> list[str]:
    lines: list[str] = []
    if facts.holiday:
        lines.append(facts.holiday.occasion)
    if facts.leave:
        lines.append(f"On leave: {facts.leave.count}")
    return lines

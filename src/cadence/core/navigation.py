"""Viewed-date cursor with a lower bound of yesterday."""

from datetime import date, timedelta

ONE_DAY = timedelta(days=1)


class DateCursor:
    """
    The day currently on screen.

    Starts at today. Single steps stay within {yesterday, today, tomorrow};
    go_to can reach any future date but never anything before yesterday.
    """

    def __init__(self, today: date):
        self.today = today
        self.viewed = today

    @property
    def yesterday(self) -> date:
        return self.today - ONE_DAY

    @property
    def tomorrow(self) -> date:
        return self.today + ONE_DAY

    def clamp(self, day: date) -> date:
        """Snap a date up to the window's lower bound."""
        return max(day, self.yesterday)

    def advance(self) -> bool:
        """Step forward one day. Allowed only from yesterday or today."""
        if self.viewed not in (self.yesterday, self.today):
            return False
        self.viewed += ONE_DAY
        return True

    def retreat(self) -> bool:
        """Step back one day. Allowed only from today or tomorrow."""
        if self.viewed not in (self.today, self.tomorrow):
            return False
        self.viewed = self.clamp(self.viewed - ONE_DAY)
        return True

    def go_to(self, day: date) -> bool:
        """Jump to a date, snapping to yesterday if it is earlier. Returns True if the date was accepted as-is."""
        self.viewed = self.clamp(day)
        return self.viewed == day

    def jump_to_today(self) -> None:
        self.viewed = self.today

    @property
    def label(self) -> str:
        if self.viewed == self.today:
            return "Today"
        if self.viewed == self.yesterday:
            return "Yesterday"
        if self.viewed == self.tomorrow:
            return "Tomorrow"
        return self.viewed.strftime("%A, %b %d")

class DotCalendarError(Exception):
    """Base class for errors raised while building a calendar image."""


class InvalidInput(DotCalendarError):
    """The request parameters cannot produce a calendar (bad date, size or color)."""


class UpstreamUnavailable(DotCalendarError):
    """A shared external asset, such as the caption font, could not be loaded."""

"""Exception hierarchy for daystamp."""


class DaystampError(Exception):
    """Base class for library errors."""


class UnknownLocaleError(DaystampError):
    """No bundled locale table matches the requested tag."""


class UnknownZoneError(DaystampError):
    """Zone name is neither an IANA key nor a UTC offset."""


class PatternError(DaystampError):
    """Date pattern contains an unsupported letter or an unterminated quote."""

"""Exceptions raised by the channel model and export layer."""


class StimConfigError(Exception):
    """Base class for Stim Config errors."""


class UnknownFieldError(StimConfigError, KeyError):
    """A field name that is not one of the channel parameters."""

    def __init__(self, field):
        super().__init__(field)
        self.field = field

    def __str__(self):
        return f"Unknown channel field: {self.field!r}"


class ExportSinkError(StimConfigError):
    """The export text could not be delivered to its sink."""

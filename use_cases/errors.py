"""Failures raised by adapters and handled by the application flows."""


class IdentityProviderError(Exception):
    """A request to the hosted identity service failed.

    ``str(error)`` is the provider's own message, suitable for display.
    """


class WaitlistWriteError(Exception):
    pass

"""Exception taxonomy raised inside the normalise -> authorize -> build -> execute pipeline.

Every operation entry point catches these and converts them into a failure
``ToolResponse``; none of them is meant to escape to the caller.
"""


class HederaAgentKitError(Exception):
    """Base class for all errors raised by the kit."""


class ValidationError(HederaAgentKitError, ValueError):
    """Malformed or missing parameters, detected before any network call."""


class ResolutionError(HederaAgentKitError, ValueError):
    """No default account or public key could be resolved."""


class AuthorizationError(HederaAgentKitError):
    """The caller is not allowed to perform the requested update."""


class NotFoundError(HederaAgentKitError, LookupError):
    """The entity does not exist according to the mirror node."""


class NetworkError(HederaAgentKitError):
    """A mirror node or ledger client call failed."""

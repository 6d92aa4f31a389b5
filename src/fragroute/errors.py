"""Fragroute exception hierarchy.

Shared across the compiler, extractor, router, and CLI so every module
raises and catches the same types.
"""


class FragrouteError(Exception):
    """Base for all fragroute-specific errors."""


class ConfigurationError(FragrouteError):
    """Raised when router configuration is invalid.

    Typically raised while building a ``RouterConfig`` or registering a
    route whose handler cannot be resolved.
    """


class PatternMismatch(FragrouteError, ValueError):  # noqa: N818
    """A fragment was handed to the extractor without matching the pattern.

    Callers must test ``pattern.matcher`` (or use ``Router.match``) before
    extracting; this is a contract violation, not a routing miss.
    """

    def __init__(self, template: str, fragment: str) -> None:
        self.template = template
        self.fragment = fragment
        super().__init__(f"Fragment {fragment!r} does not match route {template!r}")

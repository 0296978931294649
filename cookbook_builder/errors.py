"""Typed exceptions raised while building a cookbook."""


class CookbookError(Exception):
    """Base class for cookbook generation errors."""


class EmptySelectionError(CookbookError):
    """Raised when no recipe or legacy recipe is selected for the cookbook."""

    def __init__(self, message: str = "Please select at least one recipe to include in the cookbook"):
        super().__init__(message)


class GenerationError(CookbookError):
    """Raised when building, laying out or rendering the cookbook fails.

    No artifact is produced when this is raised.
    """


class RecordFormatError(GenerationError):
    """Raised when an exported record document does not match the expected shape."""


class LayoutError(GenerationError):
    """Raised when the layout engine breaks one of its page invariants."""


class ConfigFormatError(GenerationError):
    """Raised when a layout config file cannot be read as a YAML mapping."""

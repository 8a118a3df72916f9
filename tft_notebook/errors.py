"""Error types raised by the notebook."""


class NotebookError(Exception):
    """Base class for notebook errors."""


class IngestionError(NotebookError):
    """The game-data document could not be fetched or has the wrong shape.

    Fatal: without a valid catalog there is nothing to work with.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class EntityLookupError(NotebookError, LookupError):
    """An operation referenced an unknown champion, item or component."""

    kind = "entity"

    def __init__(self, key: str):
        super().__init__(f"Unknown {self.kind}: {key}")
        self.key = key


class UnknownChampionError(EntityLookupError):
    kind = "champion"


class UnknownItemError(EntityLookupError):
    kind = "item"


class UnknownComponentError(EntityLookupError):
    kind = "component"


class NoChampionSelectedError(NotebookError):
    """An item was assigned while no champion has focus."""

    def __init__(self):
        super().__init__("No champion selected")


class PersistenceError(NotebookError):
    """The build state file could not be written."""


class AssetError(NotebookError):
    """An icon could not be fetched or decoded."""

class ObjtreeError(Exception):
    """Base class for errors raised by objtree."""


class RecursiveStructureError(ObjtreeError, ValueError):
    def __init__(self, message: str = "Cannot clone recursive data-structure"):
        super().__init__(message)

"""Exception taxonomy for the result exporters.

Provides:
- ExportError: Base class for every exporter failure
- ConstructionError / HomeDirectoryError: Exporter could not be built
- IngestionError / ExporterClosedError: A finding was not recorded
- FileCreationError / SerializationError: Finalization failed
"""


class ExportError(Exception):
    """Base class for exporter errors."""


class ConstructionError(ExportError):
    """Exporter could not be constructed. Fatal at startup."""


class HomeDirectoryError(ConstructionError, OSError):
    """The current user's home directory could not be resolved."""


class IngestionError(ExportError):
    """A finding was rejected and not recorded.

    The exporter stays usable; only the offending finding is dropped.
    """


class ExporterClosedError(IngestionError):
    """The exporter was already finalized."""


class FileCreationError(ExportError):
    """The report destination could not be created or opened."""


class SerializationError(ExportError):
    """The report could not be encoded or written."""

"""Exception hierarchy for make-ca.

Two families are distinguished at the command boundary:

* ``UserError`` -- something the user can fix (bad entity name, wrong
  directory).  Reported as a single red line plus an optional hint; no
  traceback.
* ``UnexpectedError`` -- I/O or template failures while writing files.
  Reported with the underlying message.
"""

from __future__ import annotations


class MakeCaError(Exception):
    """Base class for every error raised by make-ca."""


class UserError(MakeCaError):
    """Raised for problems the user is expected to fix themselves."""

    def __init__(self, message: str, hint: str = "") -> None:
        self.hint = hint
        super().__init__(message)


class InvalidEntityNameError(UserError):
    """Raised when an entity name cannot be used for scaffolding."""


class ProjectNotInitializedError(UserError):
    """Raised when ``generate`` runs outside an initialized project."""

    def __init__(self, project_root: str) -> None:
        self.project_root = project_root
        super().__init__(
            f"Project is not initialized in {project_root}!",
            hint="make-ca init",
        )


class ProjectAlreadyInitializedError(UserError):
    """Raised when ``init`` targets a directory that already holds a project."""

    def __init__(self, project_root: str) -> None:
        self.project_root = project_root
        super().__init__(
            "Project is already initialized!",
            hint="make-ca generate <entity>",
        )


class UnexpectedError(MakeCaError):
    """Raised when file generation fails for reasons outside the user's input."""


class LayerGenerationError(UnexpectedError):
    """Raised when rendering one of the layers fails part-way through."""

    def __init__(self, layer: str, message: str) -> None:
        self.layer = layer
        super().__init__(f"Failed to generate {layer} layer: {message}")

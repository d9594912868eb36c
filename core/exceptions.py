"""Exception hierarchy for the request façade and its collaborators."""


class FacadeError(Exception):
    """Base exception for all job hunt API errors."""


class CollaboratorUnavailable(FacadeError):
    """An external collaborator is not configured or cannot be reached."""


class DatabaseUnavailable(CollaboratorUnavailable):
    """The data-access layer has no database to talk to."""


class AutomationUnavailable(CollaboratorUnavailable):
    """No automation runner has been configured for this process."""

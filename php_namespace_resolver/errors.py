class ResolverError(Exception):
    """Error reported to the user at the command boundary"""

    message = "Something went wrong."

    def __init__(self, message=None):
        super().__init__(message or self.message)

    def __str__(self):
        return self.args[0]


class NoSelection(ResolverError):
    message = "No class is selected."


class AlreadyImported(ResolverError):
    message = "Class already imported."


class NothingToSort(ResolverError):
    message = "Nothing to sort."

"""Contains exceptions raised by GitHub collaborators."""


class GitHubResourceNotFoundError(Exception):
    """Raised when GitHub responds that a requested resource does not exist."""

    def __init__(self, resource: str, name: str) -> None:
        """Initializes the exception with the kind and name of the missing resource."""
        super().__init__(f"GitHub {resource} not found: {name}")
        self.resource = resource
        self.name = name

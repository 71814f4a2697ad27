"""Domain exceptions."""


class DocStoreError(Exception):
    """Base exception for docstore."""

    pass


class ValidationError(DocStoreError):
    """Input violates the store's contract."""

    pass

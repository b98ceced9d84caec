"""Common exception classes."""

import re


class BaseError(Exception):
    """Generic exception class which other exceptions should inherit from."""

    def __init__(self, *args, error_code: str = None, **kwargs):
        """Initialize a BaseError instance."""
        super().__init__(*args, **kwargs)
        self.error_code = error_code if error_code else None

    @property
    def message(self) -> str:
        """Accessor for the error message."""
        return str(self.args[0]).strip() if self.args else ""

    @property
    def roll_up(self) -> str:
        """
        Accessor for nested error messages rolled into one line.

        For display: client facing error responses truncate after newline.
        """

        def flatten(exc: Exception):
            return ".".join(
                (
                    re.sub(
                        r"\n\s*",
                        ". ",
                        (
                            str(exc.args[0]).strip()
                            if exc.args
                            else exc.__class__.__name__
                        ),
                    ).strip()
                ).rsplit(".", 1)
            )

        line = flatten(self)
        err = self
        while err.__cause__:
            err = err.__cause__
            line += ". {}".format(flatten(err))
        return f"{line.strip()}."


class PartnerLookupError(BaseError):
    """Raised when a partner's DID document or public profile cannot be resolved."""

    NO_DID_DOC = "no_did_doc"
    NO_ENDPOINT = "no_endpoint"

    def __init__(
        self, *args, error_code: str = None, did: str = None, endpoint: str = None
    ):
        """Initialize a PartnerLookupError instance."""
        super().__init__(*args, error_code=error_code)
        self.did = did
        self.endpoint = endpoint


class DocumentValidationError(BaseError):
    """Raised when a locally authored document breaks a validation rule."""

    DOCUMENT_NOT_FOUND = "document_not_found"
    TYPE_CHANGED = "type_changed"
    SCHEMA_ID_MISSING = "schema_id_missing"
    SCHEMA_NOT_FOUND = "schema_not_found"
    ATTRIBUTE_NOT_IN_SCHEMA = "attribute_not_in_schema"
    PROFILE_ALREADY_EXISTS = "profile_already_exists"

    def __init__(self, *args, error_code: str = None, field: str = None):
        """Initialize a DocumentValidationError instance."""
        super().__init__(*args, error_code=error_code)
        self.field = field

"""Message catalogue for client facing error reasons."""

from ..core.error import DocumentValidationError, PartnerLookupError

MESSAGES = {
    PartnerLookupError.NO_DID_DOC: "Could not resolve a did document for {did}",
    PartnerLookupError.NO_ENDPOINT: (
        "Could not retrieve a public profile from endpoint: {endpoint}"
    ),
    DocumentValidationError.DOCUMENT_NOT_FOUND: (
        "Document does not exist, nothing to update"
    ),
    DocumentValidationError.TYPE_CHANGED: (
        "The type of an existing document can not be changed"
    ),
    DocumentValidationError.SCHEMA_ID_MISSING: (
        "A document of type indy credential must have a schema id"
    ),
    DocumentValidationError.SCHEMA_NOT_FOUND: "Schema with id: {id} not found",
    DocumentValidationError.ATTRIBUTE_NOT_IN_SCHEMA: (
        "Attribute: {attr} is not part of the schema"
    ),
    DocumentValidationError.PROFILE_ALREADY_EXISTS: (
        "Organizational profile already exists, only one is allowed"
    ),
}


def get_message(code: str, **params) -> str:
    """Render the message for a reason code, falling back to the code itself."""
    template = MESSAGES.get(code)
    if not template:
        return code
    return template.format(**params)

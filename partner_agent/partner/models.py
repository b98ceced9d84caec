"""Partner lookup result models."""

from enum import Enum
from typing import List, Mapping, Optional, Sequence

from marshmallow import fields

from ..did.diddoc import DIDDocument, DIDDocumentSchema
from ..documents.models import CredentialType
from ..models.base import BaseModel, BaseModelSchema


class TrustState(Enum):
    """Outcome of checking a partner's profile signature."""

    VERIFIED = "verified"
    INVALID = "invalid"
    UNDETERMINED = "undetermined"


class PartnerCredential(BaseModel):
    """A credential (or document) published in a partner's public profile."""

    class Meta:
        """PartnerCredential metadata."""

        schema_class = "PartnerCredentialSchema"

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        type: CredentialType = None,
        issuer: Optional[str] = None,
        schema_id: Optional[str] = None,
        credential_data: Optional[Mapping] = None,
        document_data: Optional[Mapping] = None,
    ):
        """Initialize PartnerCredential."""
        super().__init__()
        self.id = id
        self.type = CredentialType.get(type)
        self.issuer = issuer
        self.schema_id = schema_id
        self.credential_data = credential_data
        self.document_data = document_data


class PartnerCredentialSchema(BaseModelSchema):
    """PartnerCredential schema."""

    class Meta:
        """PartnerCredentialSchema metadata."""

        model_class = PartnerCredential

    id = fields.Str(required=False)
    type = fields.Enum(CredentialType, by_value=True, required=False)
    issuer = fields.Str(required=False, metadata={"example": "did:example:123"})
    schema_id = fields.Str(required=False, data_key="schemaId")
    credential_data = fields.Dict(required=False, data_key="credentialData")
    document_data = fields.Dict(required=False, data_key="documentData")


class PartnerResult(BaseModel):
    """Outcome of resolving and verifying a partner by DID.

    `valid` is tri-state: True or False once a signature was checked against
    a key from the DID document, None when no key could be matched or the
    document advertises no profile.
    """

    class Meta:
        """PartnerResult metadata."""

        schema_class = "PartnerResultSchema"

    def __init__(
        self,
        *,
        did: str = None,
        valid: Optional[bool] = None,
        aries_support: bool = False,
        did_doc: Optional[DIDDocument] = None,
        label: Optional[str] = None,
        credentials: Sequence[PartnerCredential] = None,
    ):
        """Initialize PartnerResult."""
        super().__init__()
        self.did = did
        self.valid = valid
        self.aries_support = aries_support
        self.did_doc = did_doc
        self.label = label
        self.credentials: List[PartnerCredential] = list(credentials or [])

    @property
    def trust_state(self) -> TrustState:
        """Accessor for the validity flag as an explicit trust state."""
        if self.valid is None:
            return TrustState.UNDETERMINED
        return TrustState.VERIFIED if self.valid else TrustState.INVALID


class PartnerResultSchema(BaseModelSchema):
    """PartnerResult schema."""

    class Meta:
        """PartnerResultSchema metadata."""

        model_class = PartnerResult

    did = fields.Str(required=True, metadata={"example": "did:example:123"})
    valid = fields.Bool(required=False, allow_none=True)
    aries_support = fields.Bool(required=False, data_key="ariesSupport")
    did_doc = fields.Nested(
        DIDDocumentSchema(), required=False, data_key="didDocument"
    )
    label = fields.Str(required=False, metadata={"example": "Partner Ltd."})
    credentials = fields.List(
        fields.Nested(PartnerCredentialSchema()),
        required=False,
        data_key="credentials",
    )

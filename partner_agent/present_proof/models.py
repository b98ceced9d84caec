"""Presentation exchange inputs and the fulfillment handed back to the agent."""

from typing import Mapping, Optional, Sequence

from marshmallow import EXCLUDE, fields

from ..models.base import BaseModel, BaseModelSchema


class IndyProofRequest(BaseModel):
    """Indy proof request: requested attributes and predicates by referent."""

    class Meta:
        """IndyProofRequest metadata."""

        schema_class = "IndyProofRequestSchema"

    def __init__(
        self,
        *,
        name: Optional[str] = None,
        version: Optional[str] = None,
        nonce: Optional[str] = None,
        requested_attributes: Optional[Mapping[str, dict]] = None,
        requested_predicates: Optional[Mapping[str, dict]] = None,
        **kwargs,
    ):
        """Initialize IndyProofRequest."""
        super().__init__()
        self.name = name
        self.version = version
        self.nonce = nonce
        # dicts keep insertion order, which fixes the order of fulfillment entries
        self.requested_attributes = dict(requested_attributes or {})
        self.requested_predicates = dict(requested_predicates or {})


class IndyProofRequestSchema(BaseModelSchema):
    """IndyProofRequest schema."""

    class Meta:
        """IndyProofRequestSchema metadata."""

        model_class = IndyProofRequest
        unknown = EXCLUDE

    name = fields.Str(required=False, metadata={"example": "Proof request"})
    version = fields.Str(required=False, metadata={"example": "1.0"})
    nonce = fields.Str(required=False, metadata={"example": "1234567890"})
    requested_attributes = fields.Dict(
        keys=fields.Str(),
        values=fields.Dict(),
        required=False,
        metadata={"example": {"0_name_uuid": {"name": "name"}}},
    )
    requested_predicates = fields.Dict(
        keys=fields.Str(),
        values=fields.Dict(),
        required=False,
        metadata={
            "example": {"0_age_GE_uuid": {"name": "age", "p_type": ">=", "p_value": 18}}
        },
    )


class PresentationExchangeRecord(BaseModel):
    """An in-flight presentation exchange, as reported by the agent."""

    class Meta:
        """PresentationExchangeRecord metadata."""

        schema_class = "PresentationExchangeRecordSchema"

    def __init__(
        self,
        *,
        presentation_exchange_id: Optional[str] = None,
        connection_id: Optional[str] = None,
        thread_id: Optional[str] = None,
        role: Optional[str] = None,
        state: Optional[str] = None,
        presentation_request: Optional[IndyProofRequest] = None,
    ):
        """Initialize PresentationExchangeRecord."""
        super().__init__()
        self.presentation_exchange_id = presentation_exchange_id
        self.connection_id = connection_id
        self.thread_id = thread_id
        self.role = role
        self.state = state
        self.presentation_request = presentation_request


class PresentationExchangeRecordSchema(BaseModelSchema):
    """PresentationExchangeRecord schema."""

    class Meta:
        """PresentationExchangeRecordSchema metadata."""

        model_class = PresentationExchangeRecord
        unknown = EXCLUDE

    presentation_exchange_id = fields.Str(required=False)
    connection_id = fields.Str(required=False)
    thread_id = fields.Str(required=False)
    role = fields.Str(required=False, metadata={"example": "prover"})
    state = fields.Str(required=False, metadata={"example": "request_received"})
    presentation_request = fields.Nested(IndyProofRequestSchema(), required=False)


class CredentialInfo(BaseModel):
    """Wallet credential details relevant to a presentation."""

    class Meta:
        """CredentialInfo metadata."""

        schema_class = "CredentialInfoSchema"

    def __init__(
        self,
        *,
        referent: str = None,
        schema_id: Optional[str] = None,
        cred_def_id: Optional[str] = None,
        attrs: Optional[Mapping[str, str]] = None,
        **kwargs,
    ):
        """Initialize CredentialInfo."""
        super().__init__()
        self.referent = referent
        self.schema_id = schema_id
        self.cred_def_id = cred_def_id
        self.attrs = dict(attrs or {})


class CredentialInfoSchema(BaseModelSchema):
    """CredentialInfo schema."""

    class Meta:
        """CredentialInfoSchema metadata."""

        model_class = CredentialInfo
        unknown = EXCLUDE

    referent = fields.Str(
        required=True,
        metadata={
            "description": "Wallet referent of the credential",
            "example": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
        },
    )
    schema_id = fields.Str(required=False)
    cred_def_id = fields.Str(required=False)
    attrs = fields.Dict(keys=fields.Str(), values=fields.Str(), required=False)


class MatchingCredential(BaseModel):
    """A wallet credential together with the request referents it satisfies."""

    class Meta:
        """MatchingCredential metadata."""

        schema_class = "MatchingCredentialSchema"

    def __init__(
        self,
        *,
        cred_info: CredentialInfo = None,
        presentation_referents: Sequence[str] = None,
        **kwargs,
    ):
        """Initialize MatchingCredential."""
        super().__init__()
        self.cred_info = cred_info
        self.presentation_referents = list(presentation_referents or [])

    @property
    def credential_id(self) -> Optional[str]:
        """Accessor for the wallet referent of the credential."""
        return self.cred_info.referent if self.cred_info else None


class MatchingCredentialSchema(BaseModelSchema):
    """MatchingCredential schema."""

    class Meta:
        """MatchingCredentialSchema metadata."""

        model_class = MatchingCredential
        unknown = EXCLUDE

    cred_info = fields.Nested(CredentialInfoSchema(), required=True)
    presentation_referents = fields.List(
        fields.Str(), required=False, metadata={"example": ["0_name_uuid"]}
    )


class FulfillmentRequest(BaseModel):
    """Credentials selected to answer a proof request."""

    class Meta:
        """FulfillmentRequest metadata."""

        schema_class = "FulfillmentRequestSchema"

    def __init__(
        self,
        *,
        requested_attributes: Optional[Mapping[str, dict]] = None,
        requested_predicates: Optional[Mapping[str, dict]] = None,
        self_attested_attributes: Optional[Mapping[str, str]] = None,
    ):
        """Initialize FulfillmentRequest."""
        super().__init__()
        self.requested_attributes = dict(requested_attributes or {})
        self.requested_predicates = dict(requested_predicates or {})
        self.self_attested_attributes = dict(self_attested_attributes or {})

    def __eq__(self, other) -> bool:
        """Check equality."""
        if isinstance(other, FulfillmentRequest):
            return (
                self.requested_attributes == other.requested_attributes
                and self.requested_predicates == other.requested_predicates
                and self.self_attested_attributes == other.self_attested_attributes
            )
        return False

    __hash__ = None


class FulfillmentRequestSchema(BaseModelSchema):
    """FulfillmentRequest schema."""

    class Meta:
        """FulfillmentRequestSchema metadata."""

        model_class = FulfillmentRequest

    requested_attributes = fields.Dict(
        keys=fields.Str(),
        values=fields.Dict(),
        required=True,
        metadata={"example": {"0_name_uuid": {"cred_id": "3fa85f64", "revealed": True}}},
    )
    requested_predicates = fields.Dict(
        keys=fields.Str(),
        values=fields.Dict(),
        required=True,
        metadata={"example": {"0_age_GE_uuid": {"cred_id": "3fa85f64"}}},
    )
    self_attested_attributes = fields.Dict(
        keys=fields.Str(), values=fields.Str(), required=False
    )

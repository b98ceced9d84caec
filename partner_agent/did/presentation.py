"""Verifiable presentation and linked data proof models."""

from typing import List, Optional, Union

from marshmallow import INCLUDE, fields, post_dump

from ..models.base import BaseModel, BaseModelSchema

CREDENTIALS_CONTEXT_V1_URL = "https://www.w3.org/2018/credentials/v1"
VERIFIABLE_PRESENTATION_TYPE = "VerifiablePresentation"


class LDProof(BaseModel):
    """Linked Data Proof model."""

    class Meta:
        """LDProof metadata."""

        schema_class = "LinkedDataProofSchema"

    def __init__(
        self,
        type: Optional[str] = None,
        proof_purpose: Optional[str] = None,
        verification_method: Optional[str] = None,
        created: Optional[str] = None,
        challenge: Optional[str] = None,
        jws: Optional[str] = None,
        proof_value: Optional[str] = None,
        **kwargs,
    ) -> None:
        """Initialize the LDProof instance."""
        super().__init__()
        self.type = type
        self.proof_purpose = proof_purpose
        self.verification_method = verification_method
        self.created = created
        self.challenge = challenge
        self.jws = jws
        self.proof_value = proof_value
        self.extra = kwargs


class LinkedDataProofSchema(BaseModelSchema):
    """Linked data proof schema."""

    class Meta:
        """Accept parameter overload."""

        unknown = INCLUDE
        model_class = LDProof

    type = fields.Str(required=True, metadata={"example": "Ed25519Signature2018"})
    proof_purpose = fields.Str(
        data_key="proofPurpose",
        required=False,
        metadata={"example": "assertionMethod"},
    )
    verification_method = fields.Str(
        data_key="verificationMethod",
        required=False,
        metadata={"example": "did:example:123#key-1"},
    )
    created = fields.Str(required=False)
    challenge = fields.Str(required=False)
    jws = fields.Str(required=False)
    proof_value = fields.Str(data_key="proofValue", required=False)

    @post_dump(pass_original=True)
    def add_unknown_properties(self, data: dict, original, **kwargs):
        """Add back unknown properties before outputting."""
        data.update(original.extra)
        return data


class VerifiablePresentation(BaseModel):
    """Signed bundle of credentials, e.g. a partner's public profile."""

    class Meta:
        """VerifiablePresentation metadata."""

        schema_class = "PresentationSchema"

    def __init__(
        self,
        context: Optional[List[Union[str, dict]]] = None,
        id: Optional[str] = None,
        type: Optional[List[str]] = None,
        holder: Optional[Union[dict, str]] = None,
        verifiable_credential: Optional[List[dict]] = None,
        proof: Optional[LDProof] = None,
        **kwargs,
    ) -> None:
        """Initialize VerifiablePresentation."""
        super().__init__()
        # members stay as received, a signed document must dump unchanged
        self.context = context
        self.id = id
        self.type = type
        self.holder = holder
        self.verifiable_credential = verifiable_credential
        self.proof = proof
        self.extra = kwargs

    @property
    def holder_id(self) -> Optional[str]:
        """Getter for holder id."""
        if not self.holder:
            return None
        elif isinstance(self.holder, str):
            return self.holder
        return self.holder.get("id")

    @property
    def proof_verification_method(self) -> str:
        """Verification method referenced by the proof, empty without proof."""
        if not self.proof:
            return ""
        return self.proof.verification_method or ""


class PresentationSchema(BaseModelSchema):
    """Linked data presentation schema."""

    class Meta:
        """Accept parameter overload."""

        unknown = INCLUDE
        model_class = VerifiablePresentation

    context = fields.Raw(
        data_key="@context",
        required=False,
        metadata={"example": [CREDENTIALS_CONTEXT_V1_URL]},
    )
    id = fields.Str(required=False)
    type = fields.Raw(
        required=False, metadata={"example": [VERIFIABLE_PRESENTATION_TYPE]}
    )
    holder = fields.Raw(required=False, metadata={"example": "did:example:123"})
    verifiable_credential = fields.List(
        fields.Raw(required=True),
        required=False,
        data_key="verifiableCredential",
    )
    proof = fields.Nested(LinkedDataProofSchema(), required=False)

    @post_dump(pass_original=True)
    def add_unknown_properties(self, data: dict, original, **kwargs):
        """Add back unknown properties before outputting."""
        data.update(original.extra)
        return data

"""DID document model as returned by a DID resolver."""

from typing import List, Optional, Sequence, Union

from marshmallow import EXCLUDE, ValidationError, fields, pre_load, validate

from ..models.base import BaseModel, BaseModelSchema

DEFAULT_VERIFICATION_KEY_TYPE = "Ed25519VerificationKey2018"

PROFILE_SERVICE_TYPE = "profile"
ARIES_SERVICE_TYPES = ("did-communication", "IndyAgent", "endpoint")


def _validate_service_type(value):
    if isinstance(value, str):
        return
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return
    raise ValidationError("Service type must be a string or a list of strings")


class VerificationMethod(BaseModel):
    """One public key bound to a DID."""

    class Meta:
        """VerificationMethod metadata."""

        schema_class = "VerificationMethodSchema"

    def __init__(
        self,
        id: str = None,
        type: str = None,
        controller: Optional[str] = None,
        public_key_base58: Optional[str] = None,
    ):
        """Initialize VerificationMethod."""
        super().__init__()
        self.id = id
        self.type = type
        self.controller = controller
        self.public_key_base58 = public_key_base58


class VerificationMethodSchema(BaseModelSchema):
    """VerificationMethod schema."""

    class Meta:
        """VerificationMethodSchema metadata."""

        model_class = VerificationMethod
        unknown = EXCLUDE

    id = fields.Str(
        required=True,
        metadata={"example": "did:example:123#key-1"},
    )
    type = fields.Str(
        required=True,
        metadata={"example": DEFAULT_VERIFICATION_KEY_TYPE},
    )
    controller = fields.Str(required=False, metadata={"example": "did:example:123"})
    public_key_base58 = fields.Str(
        required=False,
        data_key="publicKeyBase58",
        metadata={"example": "H3C2AVvLMv6gmMNam3uVAjZpfkcJCwDwnZn6z3wXmqPV"},
    )


class Service(BaseModel):
    """Service endpoint advertised in a DID document."""

    class Meta:
        """Service metadata."""

        schema_class = "ServiceSchema"

    def __init__(
        self,
        id: str = None,
        type: Union[str, List[str]] = None,
        service_endpoint: Union[str, dict, None] = None,
    ):
        """Initialize Service."""
        super().__init__()
        self.id = id
        self.type = type
        self.service_endpoint = service_endpoint

    def has_type(self, *service_types: str) -> bool:
        """Check the service type, given as a string or a list, against names."""
        types = [self.type] if isinstance(self.type, str) else self.type or []
        return any(service_type in types for service_type in service_types)


class ServiceSchema(BaseModelSchema):
    """Service schema."""

    class Meta:
        """ServiceSchema metadata."""

        model_class = Service
        unknown = EXCLUDE

    id = fields.Str(required=False, metadata={"example": "did:example:123#profile"})
    type = fields.Raw(
        required=True,
        validate=_validate_service_type,
        metadata={"example": PROFILE_SERVICE_TYPE},
    )
    service_endpoint = fields.Raw(
        required=False,
        data_key="serviceEndpoint",
        metadata={"example": "https://partner.example/profile"},
    )


class DIDDocument(BaseModel):
    """Read only snapshot of a resolved DID document."""

    class Meta:
        """DIDDocument metadata."""

        schema_class = "DIDDocumentSchema"

    def __init__(
        self,
        id: str = None,
        verification_method: Sequence[VerificationMethod] = None,
        service: Sequence[Service] = None,
    ):
        """Initialize DIDDocument."""
        super().__init__()
        self.id = id
        self.verification_method: List[VerificationMethod] = list(
            verification_method or []
        )
        self.service: List[Service] = list(service or [])

    def find_public_profile_url(self) -> Optional[str]:
        """Return the endpoint of the first public profile service, if any."""
        for service in self.service:
            if service.has_type(PROFILE_SERVICE_TYPE) and isinstance(
                service.service_endpoint, str
            ):
                return service.service_endpoint
        return None

    def has_aries_endpoint(self) -> bool:
        """Check whether the document advertises a DIDComm endpoint."""
        return any(service.has_type(*ARIES_SERVICE_TYPES) for service in self.service)


class DIDDocumentSchema(BaseModelSchema):
    """DIDDocument schema."""

    class Meta:
        """DIDDocumentSchema metadata."""

        model_class = DIDDocument
        unknown = EXCLUDE

    id = fields.Str(
        required=True,
        validate=validate.Length(min=1),
        metadata={"example": "did:example:123"},
    )
    verification_method = fields.List(
        fields.Nested(VerificationMethodSchema()),
        required=False,
        data_key="verificationMethod",
    )
    service = fields.List(fields.Nested(ServiceSchema()), required=False)

    @pre_load
    def accept_legacy_public_key(self, data, **kwargs):
        """Treat a legacy `publicKey` list as `verificationMethod`."""
        if isinstance(data, dict) and "publicKey" in data:
            data = dict(data)
            legacy = data.pop("publicKey") or []
            data["verificationMethod"] = [*data.get("verificationMethod", []), *legacy]
        return data

"""Locally authored documents and the schemas governing them."""

from enum import Enum
from typing import Iterable, Mapping, Optional

from marshmallow import fields, validate

from ..models.base import BaseModel, BaseModelSchema


class CredentialType(Enum):
    """Document and credential types known to the agent."""

    ORGANIZATIONAL_PROFILE_CREDENTIAL = "ORGANIZATIONAL_PROFILE_CREDENTIAL"
    BANK_ACCOUNT_CREDENTIAL = "BANK_ACCOUNT_CREDENTIAL"
    INDY = "INDY"

    @classmethod
    def get(cls, value) -> Optional["CredentialType"]:
        """Look up a type by value, passing members through."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        return None


SCHEMA_GOVERNED_TYPES = (CredentialType.INDY,)


class MyDocument(BaseModel):
    """A document authored by this agent, before it becomes a credential."""

    class Meta:
        """MyDocument metadata."""

        schema_class = "MyDocumentSchema"

    def __init__(
        self,
        *,
        id: str = None,
        type: CredentialType = None,
        schema_id: Optional[str] = None,
        document_data: Mapping = None,
        is_public: bool = False,
        label: Optional[str] = None,
    ):
        """Initialize MyDocument."""
        super().__init__()
        self.id = id
        self.type = CredentialType.get(type)
        self.schema_id = schema_id
        self.document_data = dict(document_data or {})
        self.is_public = is_public
        self.label = label

    @property
    def schema_governed(self) -> bool:
        """Whether the payload must conform to a schema."""
        return self.type in SCHEMA_GOVERNED_TYPES


class MyDocumentSchema(BaseModelSchema):
    """MyDocument schema."""

    class Meta:
        """MyDocumentSchema metadata."""

        model_class = MyDocument

    id = fields.Str(required=False, metadata={"example": "3fa85f64-5717-4562"})
    type = fields.Enum(CredentialType, by_value=True, required=True)
    schema_id = fields.Str(
        required=False,
        data_key="schemaId",
        metadata={"example": "WgWxqztrNooG92RXvxSTWv:2:bank_account:1.0"},
    )
    document_data = fields.Dict(
        keys=fields.Str(), required=False, data_key="documentData"
    )
    is_public = fields.Bool(required=False, data_key="isPublic")
    label = fields.Str(required=False)


class SchemaInfo(BaseModel):
    """A schema as known to the agent, with its declared attribute names."""

    class Meta:
        """SchemaInfo metadata."""

        schema_class = "SchemaInfoSchema"

    def __init__(
        self,
        *,
        schema_id: str = None,
        label: Optional[str] = None,
        schema_attribute_names: Iterable[str] = None,
    ):
        """Initialize SchemaInfo."""
        super().__init__()
        self.schema_id = schema_id
        self.label = label
        self.schema_attribute_names = set(schema_attribute_names or ())


class SchemaInfoSchema(BaseModelSchema):
    """SchemaInfo schema."""

    class Meta:
        """SchemaInfoSchema metadata."""

        model_class = SchemaInfo

    schema_id = fields.Str(
        required=True,
        data_key="schemaId",
        validate=validate.Length(min=1),
        metadata={"example": "WgWxqztrNooG92RXvxSTWv:2:bank_account:1.0"},
    )
    label = fields.Str(required=False)
    schema_attribute_names = fields.List(
        fields.Str(), required=False, data_key="schemaAttributeNames"
    )

"""Marshmallow backed model and schema base classes."""

import logging
import sys
from abc import ABC
from typing import Optional, Type, TypeVar

from marshmallow import Schema, ValidationError, post_dump, post_load

from ..core.error import BaseError

LOGGER = logging.getLogger(__name__)


def resolve_class(the_cls, relative_cls: Optional[type] = None) -> type:
    """Return `the_cls`, or the class it names in the module of `relative_cls`."""
    if isinstance(the_cls, type):
        return the_cls
    if isinstance(the_cls, str) and relative_cls:
        resolved = getattr(sys.modules[relative_cls.__module__], the_cls, None)
        if isinstance(resolved, type):
            return resolved
    raise TypeError(f"Cannot resolve a class from {the_cls!r}")


def resolve_meta_property(obj, prop_name: str, defval=None):
    """Find `prop_name` on the nearest `Meta` along the class chain of `obj`."""
    cls = obj if isinstance(obj, type) else type(obj)
    for klass in cls.__mro__:
        meta = klass.__dict__.get("Meta")
        if meta is not None and hasattr(meta, prop_name):
            return getattr(meta, prop_name)
    return defval


class BaseModelError(BaseError):
    """A model failed to load from, or dump to, its schema."""


ModelType = TypeVar("ModelType", bound="BaseModel")


class BaseModel(ABC):
    """
    Model paired with a `BaseModelSchema`.

    Subclasses name their schema in `Meta.schema_class`, either as the class
    itself or as its name in the same module.
    """

    class Meta:
        schema_class = None

    def __init__(self):
        if not self.Meta.schema_class:
            raise TypeError(
                f"{self.__class__.__name__} cannot be built without a schema_class"
            )

    @classmethod
    def _get_schema_class(cls) -> Type["BaseModelSchema"]:
        resolved = resolve_class(cls.Meta.schema_class, cls)
        if not issubclass(resolved, BaseModelSchema):
            raise TypeError(f"{resolved.__name__} is not a BaseModelSchema")
        return resolved

    @classmethod
    def deserialize(cls: Type[ModelType], obj) -> ModelType:
        """
        Load a model from its JSON form.

        Raises:
            BaseModelError: if `obj` does not match the schema

        """
        schema = cls._get_schema_class()()
        try:
            return schema.load(obj)
        except (AttributeError, TypeError, ValidationError) as err:
            LOGGER.debug("%s does not match its schema: %s", cls.__name__, err)
            raise BaseModelError(f"{cls.__name__} schema validation failed") from err

    def serialize(self) -> dict:
        """Dump the model to its JSON form, leaving out unset members."""
        schema = self._get_schema_class()()
        try:
            return schema.dump(self)
        except (AttributeError, ValidationError) as err:
            raise BaseModelError(
                f"{self.__class__.__name__} schema validation failed"
            ) from err


class BaseModelSchema(Schema):
    """Schema loading into, and dumping from, a `BaseModel`."""

    class Meta:
        model_class = None
        skip_values = [None]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.Meta.model_class:
            raise TypeError(
                f"{self.__class__.__name__} cannot be built without a model_class"
            )

    @post_load
    def make_model(self, data: dict, **kwargs):
        model_class = resolve_class(self.Meta.model_class, type(self))
        return model_class(**data)

    @post_dump
    def remove_skipped_values(self, data, **kwargs):
        skip_values = resolve_meta_property(self, "skip_values", [])
        return {key: value for key, value in data.items() if value not in skip_values}

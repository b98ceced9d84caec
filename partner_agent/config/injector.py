"""Component registry filled once by the context builder."""

from typing import Mapping, Optional, Type, TypeVar

from .base import InjectorError
from .settings import Settings

InjectType = TypeVar("InjectType")


class Injector:
    """Map base classes to the single instance bound for each."""

    def __init__(
        self, settings: Mapping[str, object] = None, *, enforce_typing: bool = True
    ):
        self.enforce_typing = enforce_typing
        self._instances = {}
        self._settings = Settings(settings)

    @property
    def settings(self) -> Settings:
        """Settings shared by every bound component."""
        return self._settings

    def bind_instance(self, base_cls: Type[InjectType], instance: InjectType):
        """Bind `instance` as the provider of `base_cls`."""
        if instance is None:
            raise ValueError(f"Cannot bind None for {base_cls.__name__}")
        self._instances[base_cls] = instance

    def clear_binding(self, base_cls: Type[InjectType]):
        """Forget the instance bound for `base_cls`, if any."""
        self._instances.pop(base_cls, None)

    def inject(
        self,
        base_cls: Type[InjectType],
        *,
        required: bool = True,
    ) -> Optional[InjectType]:
        """
        Return the instance bound for `base_cls`.

        Args:
            base_cls: The class the caller depends on
            required: Raise `InjectorError` when nothing is bound,
                otherwise return None

        Raises:
            InjectorError: if the bound instance is not a `base_cls` while
                typing is enforced

        """
        instance = self._instances.get(base_cls)
        if instance is None:
            if required:
                raise InjectorError(f"Nothing bound for {base_cls.__name__}")
            return None
        if self.enforce_typing and not isinstance(instance, base_cls):
            raise InjectorError(
                f"Instance bound for {base_cls.__name__} is a "
                f"{type(instance).__name__}"
            )
        return instance

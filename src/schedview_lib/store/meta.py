# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import os
from abc import ABCMeta

from schedview_lib.core.config import CFG
from schedview_lib.core.error import SVError
from schedview_lib.core.logger import get_logger

from .interface import StoreInterface

logger = get_logger(__name__)


class BackendMeta(ABCMeta):
    """
    Metaclass for store backend classes.
    """

    # registry of supported store backends
    _registry: dict[str, type[StoreInterface]] = {}

    def __str__(cls: type[StoreInterface]):
        """
        Get the string representation of the store backend class.
        """
        return cls.envName()

    @classmethod
    def register(cls, backend_cls: type[StoreInterface]):
        """
        Register a store backend class in the metaclass registry.

        Args:
            backend_cls: Subclass of StoreInterface to register.
        """
        cls._registry[backend_cls.envName()] = backend_cls

    @classmethod
    def fromStr(mcs, name: str) -> type[StoreInterface]:
        """
        Return the store backend class registered with the given name.

        Raises:
            SVError: If no class is registered for the given name.
        """
        try:
            return mcs._registry[name]
        except KeyError as e:
            raise SVError(f"No store backend registered as '{name}'.") from e

    @classmethod
    def fromEnvVarOrDefault(mcs) -> type[StoreInterface]:
        """
        Select a store backend based on the environment variable or the configuration.

        Returns:
            type[StoreInterface]: The selected store backend class.

        Raises:
            SVError: If the selected name does not belong to a registered backend.
        """
        name = os.environ.get(CFG.env_vars.backend)
        if name:
            logger.debug(
                f"Using store backend name from an environment variable: {name}."
            )
            return BackendMeta.fromStr(name)

        return BackendMeta.fromStr(CFG.store.backend)

    @classmethod
    def obtain(mcs, name: str | None) -> type[StoreInterface]:
        """
        Obtain a store backend class by name, environment variable, or configuration.

        Args:
            name (str | None): Optional name of the store backend to obtain.
                If `None`, falls back to `fromEnvVarOrDefault`.

        Returns:
            type[StoreInterface]: The selected store backend class.

        Raises:
            SVError: If no backend with the selected name is registered.
        """
        if name:
            return BackendMeta.fromStr(name)

        return BackendMeta.fromEnvVarOrDefault()


def backend(cls: type[StoreInterface]) -> type[StoreInterface]:
    """
    Class decorator registering a store backend in `BackendMeta`.
    """
    BackendMeta.register(cls)
    return cls

"""
Global registry of named Markov process builders using singleton pattern.

This module implements a centralized registry that maps process names to
factories, enabling processes to be created by name across the application.
"""

from __future__ import annotations

__author__ = "rlmdp-core developers"
__copyright__ = "Copyright (c) 2026 rlmdp-core project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from rlmdp_core.markov.process import MarkovProcess


@dataclass(frozen=True, slots=True)
class ProcessSpec:
    """
    Named factory of a Markov process.

    Parameters
    ----------
    name : str
        Registry key.
    factory : Callable[..., MarkovProcess]
        Builds a process from keyword parameters.
    description : str
        One-line human-readable description.
    """

    name: str
    factory: Callable[..., MarkovProcess[Any]]
    description: str = ""

    def __call__(self, **params: Any) -> MarkovProcess[Any]:
        return self.factory(**params)


class ProcessRegister:
    """
    Singleton registry of named process factories.
    """

    _instance: ClassVar[ProcessRegister | None] = None
    _registered: dict[str, ProcessSpec]

    def __new__(cls) -> ProcessRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ProcessSpec:
        """
        Retrieve a process factory by name.

        Raises
        ------
        ValueError
            If no process with the given name exists.
        """
        self = cls()
        if name not in self._registered:
            raise ValueError(f"No process {name} found in register")
        return self._registered[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._registered

    @classmethod
    def names(cls) -> list[str]:
        """Registered names in registration order."""
        return list(cls()._registered)

    @classmethod
    def register(cls, spec: ProcessSpec) -> None:
        """
        Register a new process factory.

        Raises
        ------
        ValueError
            If a process with the same name is already registered.
        """
        self = cls()
        if spec.name in self._registered:
            raise ValueError(f"Process {spec.name} already found in register")
        self._registered[spec.name] = spec

    @classmethod
    def create(cls, name: str, **params: Any) -> MarkovProcess[Any]:
        """
        Build the process registered under ``name``.

        Parameters
        ----------
        name : str
            Registry key.
        **params
            Forwarded to the factory.
        """
        return cls.get(name)(**params)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


__all__ = ["ProcessSpec", "ProcessRegister"]

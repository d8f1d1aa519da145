# -*- coding: utf-8 -*-
"""Named registries of pluggable callables."""
import traceback
from typing import Any, Callable, Optional

from sudoku.utils.log import get_logger


class Registry(object):
    """A registry mapping names to callables (classes or functions)."""

    def __init__(self, name: str, default_mapping: Optional[dict] = None):
        """
        Args:
            name (`str`): The name of the registry.
            default_mapping (`dict`): Default mapping from module names to
                dotted import paths (strings), resolved lazily on `get`.
        """
        self._name = name
        self._modules = {}
        self._default_mapping = dict(default_mapping or {})
        self.logger = get_logger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def modules(self) -> dict:
        """Modules registered explicitly or resolved so far."""
        return self._modules

    def names(self) -> list:
        """All names this registry can resolve, registered ones first."""
        return list(self._modules) + [k for k in self._default_mapping if k not in self._modules]

    def __contains__(self, module_key) -> bool:
        return module_key in self._modules or module_key in self._default_mapping

    def get(self, module_key) -> Any:
        """
        Get the module named `module_key`.

        Lookup order is: explicitly registered modules, the default mapping,
        then `module_key` itself read as a dotted import path.

        Args:
            module_key (`str`): specified module name

        Returns:
            `Any`: the module object, or None if `module_key` is None

        Raises:
            `ValueError`: if `module_key` cannot be resolved.
            `ImportError`: if a mapped import path cannot be imported.
        """
        module = self._modules.get(module_key, None)
        if module is not None:
            return module
        if module_key in self._default_mapping:
            module_path, attr_name = self._default_mapping[module_key].rsplit(".", 1)
            module = self._import(module_path, attr_name)
            self._register_module(module_name=module_key, module_obj=module)
        elif isinstance(module_key, str) and "." in module_key:
            module_path, attr_name = module_key.rsplit(".", 1)
            module = self._import(module_path, attr_name)
            self._register_module(module_name=module_key, module_obj=module)
        elif module_key is None:
            self.logger.info("Empty module key, return None")
            return None
        else:
            raise ValueError(f"Invalid module key for {self._name}: {module_key}")
        return module

    def _import(self, module_path: str, attr_name: str) -> Any:
        try:
            return self._dynamic_import(module_path, attr_name)
        except Exception:
            self.logger.error(
                f"Failed to dynamically import {attr_name} from {module_path}:\n"
                + traceback.format_exc()
            )
            raise ImportError(f"Cannot dynamically import {attr_name} from {module_path}")

    def _register_module(self, module_name=None, module_obj=None, force=False):
        if module_name is None:
            module_name = module_obj.__name__

        if module_name in self._modules and not force:
            self.logger.warning(
                f"{module_name} is already registered in {self._name}, "
                f"if you want to override it, please set force=True."
            )
            raise KeyError(f"{module_name} is already registered in {self._name}")

        self._modules[module_name] = module_obj

    def register_module(
        self, module_name: Optional[str] = None, module_obj: Callable = None, force=False
    ):
        """
        Register a callable under `module_name`.

        Args:
            module_name (`str`): The module name. Defaults to the object's `__name__`.
            module_obj (`Callable`): The object to register. If None, a decorator is returned.
            force (`bool`): Whether to override an existing entry with the same name.

        Example:

            .. code-block:: python

                RULES = Registry("rules")

                @RULES.register_module("my_rule")
                def my_rule(board):
                    ...
        """
        if not (module_name is None or isinstance(module_name, str)):
            raise TypeError(f"module_name must be either of None, str, got {type(module_name)}")
        if module_obj is not None:
            self._register_module(module_name=module_name, module_obj=module_obj, force=force)
            return module_obj

        def _register(module_obj):
            self._register_module(module_name=module_name, module_obj=module_obj, force=force)
            return module_obj

        return _register

    def _dynamic_import(self, module_path: str, attr_name: str) -> Any:
        import importlib

        module = importlib.import_module(module_path)
        return getattr(module, attr_name)

# topmark:header:start
#
#   project      : TsMark
#   file         : __init__.py
#   file_relpath : src/tsmark/pipeline/processors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment processor registry.

Processor modules in this package register themselves with `register_processor`;
`register_all_processors` imports every module of the package so that the registry
is complete before the first lookup.
"""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import TYPE_CHECKING, Callable, TypeVar

from tsmark.config.logging import get_logger
from tsmark.pipeline.processors.types import CommentSyntax

if TYPE_CHECKING:
    from tsmark.config.logging import TsmarkLogger
    from tsmark.pipeline.processors.base import CommentProcessor

logger: TsmarkLogger = get_logger(__name__)

P = TypeVar("P", bound="type[CommentProcessor]")

_PROCESSOR_REGISTRY: dict[CommentSyntax, CommentProcessor] = {}


def register_processor(syntax: CommentSyntax) -> Callable[[P], P]:
    """Class decorator binding a processor class to a comment syntax.

    Args:
        syntax (CommentSyntax): The syntax implemented by the decorated class.

    Returns:
        Callable[[P], P]: Decorator registering one instance of the class.
    """

    def _decorator(cls: P) -> P:
        cls.syntax = syntax
        if syntax in _PROCESSOR_REGISTRY:
            logger.debug(
                "Replacing processor for %s: %s -> %s",
                syntax.value,
                _PROCESSOR_REGISTRY[syntax].__class__.__name__,
                cls.__name__,
            )
        _PROCESSOR_REGISTRY[syntax] = cls()
        return cls

    return _decorator


def get_processor(syntax: CommentSyntax) -> CommentProcessor:
    """Return the processor registered for ``syntax``.

    Raises:
        KeyError: If no processor is registered for ``syntax``.
    """
    if not _PROCESSOR_REGISTRY:
        register_all_processors()
    return _PROCESSOR_REGISTRY[syntax]


# Dynamically import all modules in the processors/ directory
def register_all_processors() -> None:
    """Import all processor modules in the current package."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg:
            # Import the module to ensure it registers its processor
            importlib.import_module(f"{__name__}.{module_info.name}")
    logger.trace(
        "Registered comment processors: %s",
        {k.value: v.__class__.__name__ for k, v in _PROCESSOR_REGISTRY.items()},
    )

"""
Framework Bootstrap

Startup sequence for a framework laid out as <core_root>/<namespace>/<prefix><Class>.py:
preload a fixed list of base units, then register the framework autoloader
for everything else. A failed preload fails the whole startup.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Union

from .loader.path_resolver import PathFn, suffixed_filename
from .loader.preload import PathForSymbol
from .loader.service import Autoload
from .shared.errors import BootstrapError, PreloadFailureError
from .utils.config import SYMBOL_SEPARATOR, source_extension

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def preload_path(core_root: PathLike, file_prefix: str = "",
                 extension: Optional[str] = None) -> PathForSymbol:
    """
    Path callback for framework preloads.

    Drops the vendor and package levels and lower-cases the rest of the
    namespace: 'Acme/Core/Base/Master' -> <core_root>/base/<prefix>Master.py
    """
    root = Path(core_root)
    ext = extension if extension is not None else source_extension()

    def path_for(symbol: str) -> Optional[Path]:
        levels = symbol.lstrip(SYMBOL_SEPARATOR).split(SYMBOL_SEPARATOR)[2:]
        if not levels or not levels[-1]:
            return None
        *namespace, classname = levels
        return root.joinpath(*(level.lower() for level in namespace), f"{file_prefix}{classname}{ext}")

    return path_for


def framework_strategy(core_root: PathLike, vendor: str, package: str,
                       file_prefix: str = "", extension: Optional[str] = None) -> PathFn:
    """
    Autoload strategy for the framework's own symbols.

    Declines anything outside <vendor>/<package>; otherwise maps
    'acme/core/support', 'Arr_Helper' -> <core_root>/support/<prefix>Arr.helper.py
    """
    root = Path(core_root)
    expected = [vendor.lower(), package.lower()]

    def resolve(namespace: str, classname: str) -> Optional[Path]:
        levels = namespace.split(SYMBOL_SEPARATOR)
        if levels[:2] != expected:
            return None
        return root.joinpath(*levels[2:], suffixed_filename(classname, file_prefix, extension))

    return resolve


class Bootstrap:
    """
    Boots an Autoload service for a framework tree.

    Example:
        autoload = Bootstrap('/srv/acme/core', preloaders=['Acme/Core/Base/Master']).boot()
    """

    def __init__(
        self,
        core_root: PathLike,
        preloaders: Iterable[str] = (),
        vendor: str = "acme",
        package: str = "core",
        file_prefix: str = "",
        alias: Optional[str] = None,
        autoload: Optional[Autoload] = None,
    ):
        self.core_root = Path(core_root)
        self.preloaders = list(preloaders)
        self.vendor = vendor
        self.package = package
        self.file_prefix = file_prefix
        self.alias = alias or vendor
        self.autoload = autoload

    def boot(self) -> Autoload:
        """
        Preload, then register the framework strategy.

        Raises:
            BootstrapError: If any preloader cannot be loaded
        """
        autoload = self.autoload if self.autoload is not None else Autoload()

        try:
            autoload.include(self.preloaders, preload_path(self.core_root, self.file_prefix))
        except PreloadFailureError as e:
            raise BootstrapError(
                f"Cannot boot from {self.core_root}: {e}",
                help="every preloader must exist; check the preload list and the core root",
            ) from e
        logger.debug(f"Bootstrap: preloaded {len(self.preloaders)} symbols from {self.core_root}")

        autoload.register(
            self.alias,
            framework_strategy(self.core_root, self.vendor, self.package, self.file_prefix),
        )
        self.autoload = autoload
        return autoload

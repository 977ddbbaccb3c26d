"""Per-installation catalog lookup, merge and memoisation."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Set, Union

from .config import CompletionSettings
from .core.generator import Catalog, generate_classes_with_details
from .core.parser import parse_meta_vars, parse_utility_classes
from .errors import ArtifactNotFoundError, InstallationNotFoundError, LasError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
Reporter = Callable[[LasError], None]

MISSING_INSTALLATION = "missing-dir"


def find_installation(start_dir: PathLike, package_name: str = "lascss") -> Optional[Path]:
    """Walk up from ``start_dir`` to the nearest ``node_modules/<package_name>``."""
    current = Path(start_dir).resolve()
    while True:
        candidate = current / "node_modules" / package_name
        if candidate.is_dir():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def merge_catalog(generated: Catalog, utility_classes: Mapping[str, str]) -> Catalog:
    """Combine the token-generated catalog with the literal utility declarations.

    A utility declaration replaces a generated detail for the same class.
    """
    classes = list(dict.fromkeys([*generated.classes, *utility_classes]))
    details: Dict[str, str] = dict(generated.details)
    details.update(utility_classes)
    variants = list(generated.variants)
    seen = set(variants)
    for class_name in classes:
        index = class_name.find(":")
        if index > 0 and class_name[:index] not in seen:
            seen.add(class_name[:index])
            variants.append(class_name[:index])
    return Catalog(classes=classes, details=details, variants=variants)


def build_catalog(installation: PathLike, settings: Optional[CompletionSettings] = None) -> Catalog:
    settings = settings or CompletionSettings()
    root = Path(installation)
    meta_path = root / settings.meta_file
    utility_path = root / settings.utility_file
    missing = [str(path) for path in (meta_path, utility_path) if not path.is_file()]
    if missing:
        raise ArtifactNotFoundError(
            f"{Path(settings.meta_file).name} or {Path(settings.utility_file).name} not found",
            path=", ".join(missing),
        )
    generated = generate_classes_with_details(parse_meta_vars(meta_path), settings.namespace)
    catalog = merge_catalog(generated, parse_utility_classes(utility_path))
    logger.info(
        "Built LASCSS catalog for %s: %d classes, %d variants",
        root,
        len(catalog.classes),
        len(catalog.variants),
    )
    return catalog


class CatalogCache:
    """Memoises one catalog per installation directory.

    Concurrent lookups of the same key share a single computation; a
    computation that raises is not cached.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[str, "Future[Catalog]"] = {}

    @staticmethod
    def _key(installation: PathLike) -> str:
        return str(Path(installation).resolve())

    def get_or_compute(self, installation: PathLike, factory: Callable[[], Catalog]) -> Catalog:
        key = self._key(installation)
        with self._lock:
            future = self._entries.get(key)
            owner = future is None
            if owner:
                future = Future()
                self._entries[key] = future
        if not owner:
            return future.result()
        try:
            result = factory()
        except BaseException as exc:
            with self._lock:
                if self._entries.get(key) is future:
                    del self._entries[key]
            future.set_exception(exc)
            raise
        future.set_result(result)
        return result

    def invalidate(self, installation: PathLike) -> None:
        with self._lock:
            self._entries.pop(self._key(installation), None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, installation: object) -> bool:
        if not isinstance(installation, (str, Path)):
            return False
        with self._lock:
            return self._key(installation) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CatalogResolver:
    """Finds, builds and caches the catalog that applies to a document."""

    def __init__(
        self,
        settings: Optional[CompletionSettings] = None,
        cache: Optional[CatalogCache] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.settings = settings or CompletionSettings()
        self.cache = cache if cache is not None else CatalogCache()
        self.reporter = reporter
        self._reported: Set[str] = set()

    def locate(self, document_path: PathLike, workspace_root: Optional[PathLike] = None) -> Optional[Path]:
        package = self.settings.package_name
        installation = find_installation(Path(document_path).parent, package)
        if installation is None and workspace_root is not None:
            installation = find_installation(workspace_root, package)
        return installation

    def catalog_for_installation(self, installation: PathLike) -> Catalog:
        return self.cache.get_or_compute(installation, lambda: build_catalog(installation, self.settings))

    def catalog_for(self, document_path: PathLike, workspace_root: Optional[PathLike] = None) -> Optional[Catalog]:
        installation = self.locate(document_path, workspace_root)
        if installation is None:
            self._report(
                MISSING_INSTALLATION,
                InstallationNotFoundError(f"{self.settings.package_name} not found. Is it installed in this project?"),
            )
            return None
        try:
            return self.catalog_for_installation(installation)
        except LasError as exc:
            self._report(str(installation), exc)
            return None

    def _report(self, cause: str, error: LasError) -> None:
        if cause in self._reported:
            return
        self._reported.add(cause)
        logger.warning("%s", error.format())
        if self.reporter is not None:
            self.reporter(error)


__all__ = [
    "CatalogCache",
    "CatalogResolver",
    "build_catalog",
    "find_installation",
    "merge_catalog",
]

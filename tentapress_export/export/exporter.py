"""
Export assembly.

Exporter.create_export_zip() is the single entrypoint of the package.
It walks a fixed, linear sequence of stages:

    INIT -> CONTENT_WRITTEN -> OPTIONAL_WRITES -> MANIFEST_WRITTEN -> FINALIZED

    INIT              ensure the staging dir, reserve a name, open the zip
    CONTENT_WRITTEN   pages.json, unconditionally
    OPTIONAL_WRITES   settings / theme / plugins / seo, each behind its flag
    MANIFEST_WRITTEN  manifest.json, describing what was actually written
    FINALIZED         zip sealed, ArchiveResult returned

Only container problems escalate (ExportInitError before anything is
written, ExportWriteError afterwards, with the partial file removed).
A missing table or subsystem is recorded in the affected document and
the export carries on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Union

from ..collectors import (
    CollectorResult,
    collect_pages,
    collect_plugins,
    collect_seo,
    collect_settings,
    collect_theme,
)
from ..collectors.result import unavailable_listing
from ..config import ExportConfig, load_config
from ..db import DBPool, create_backend, ensure_backend
from ..errors import ExportInitError
from ..stores import PageStore, SeoStore, SettingsStore
from ..utils.paths import StoragePaths
from ..utils.temp import ensure_export_dir, reserve_export_path, utc_now
from .archive import ArchiveWriter
from .manifest import MANIFEST_ENTRY, ExportManifest

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Options / result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ExportOptions:
    """
    Which optional domains to export. Pages are always exported.
    """

    include_settings: bool = True
    include_theme: bool = True
    include_plugins: bool = True
    include_seo: bool = True

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None) -> "ExportOptions":
        """
        Build options from request-style data. Missing or None values
        mean "include".
        """
        data = data or {}

        def _flag(name: str) -> bool:
            value = data.get(name)
            return True if value is None else bool(value)

        return cls(
            include_settings=_flag("include_settings"),
            include_theme=_flag("include_theme"),
            include_plugins=_flag("include_plugins"),
            include_seo=_flag("include_seo"),
        )


@dataclass(frozen=True)
class ArchiveResult:
    """
    A freshly written archive. The caller owns the file and should
    delete it once delivered.
    """

    path: Path
    filename: str


class ExportStage(str, Enum):
    INIT = "init"
    CONTENT_WRITTEN = "content_written"
    OPTIONAL_WRITES = "optional_writes"
    MANIFEST_WRITTEN = "manifest_written"
    FINALIZED = "finalized"


_STAGE_ORDER = list(ExportStage)


# ---------------------------------------------------------------------------
# Domains
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Domain:
    """
    One exported data domain.

    name:     key in manifest.includes
    entry:    archive entry name
    flag:     ExportOptions attribute gating it, None for always
    collect:  runs the collector against an Exporter
    fallback: result used when the collector itself blows up
    """

    name: str
    entry: str
    flag: Optional[str]
    collect: Callable[["Exporter"], CollectorResult]
    fallback: Callable[[str], CollectorResult]

    def requested(self, options: ExportOptions) -> bool:
        return self.flag is None or bool(getattr(options, self.flag))


def _theme_fallback(reason: str) -> CollectorResult:
    return CollectorResult.unavailable(
        reason, {"active_theme_id": None, "layouts": [], "error": reason}
    )


def _plugins_fallback(reason: str) -> CollectorResult:
    return CollectorResult.unavailable(
        reason, {"enabled": [], "cache_path": None, "error": reason}
    )


PAGES = Domain(
    "pages", "pages.json", None,
    lambda ex: collect_pages(ex.pages),
    unavailable_listing,
)
SETTINGS = Domain(
    "settings", "settings.json", "include_settings",
    lambda ex: collect_settings(ex.settings),
    unavailable_listing,
)
THEME = Domain(
    "theme", "theme.json", "include_theme",
    lambda ex: collect_theme(ex.theme_manager),
    _theme_fallback,
)
PLUGINS = Domain(
    "plugins", "plugins.json", "include_plugins",
    lambda ex: collect_plugins(ex.cache_resolver, ex.plugin_manager),
    _plugins_fallback,
)
SEO = Domain(
    "seo", "seo.json", "include_seo",
    lambda ex: collect_seo(ex.seo),
    CollectorResult.unavailable,
)

OPTIONAL_DOMAINS = (SETTINGS, THEME, PLUGINS, SEO)
DOMAINS = (PAGES,) + OPTIONAL_DOMAINS


# ---------------------------------------------------------------------------
# Per-call state
# ---------------------------------------------------------------------------

class _ExportRun:
    """
    Book-keeping for one create_export_zip() call.
    """

    def __init__(self, writer: ArchiveWriter):
        self.writer = writer
        self.stage = ExportStage.INIT
        self.written: List[str] = []

    def advance(self, stage: ExportStage) -> None:
        if _STAGE_ORDER.index(stage) < _STAGE_ORDER.index(self.stage):
            raise RuntimeError(f"Export cannot move from {self.stage.value} back to {stage.value}")
        logger.debug("Export %s: %s -> %s", self.writer.path.name, self.stage.value, stage.value)
        self.stage = stage

    def write(self, domain: Domain, result: CollectorResult) -> None:
        if not result.writes_entry:
            logger.info("Skipping %s: %s", domain.entry, result.reason)
            return
        self.writer.add_document(domain.entry, result.document)
        self.written.append(domain.name)


# ---------------------------------------------------------------------------
# Exporter
# ---------------------------------------------------------------------------

class Exporter:
    """
    Builds TentaPress export archives.

    Parameters
    ----------
    export_dir :
        Staging directory for archives.
    pages, settings, seo :
        Stores for the DB-backed domains. None means the domain's
        backing storage is absent.
    theme_manager, plugin_manager :
        External subsystems, probed through the capability protocols.
    cache_resolver :
        Object exposing plugin_cache_path().
    clock :
        Returns the current UTC datetime; used for names and the manifest.
    """

    def __init__(
        self,
        export_dir: Union[str, Path],
        *,
        pages: Optional[PageStore] = None,
        settings: Optional[SettingsStore] = None,
        seo: Optional[SeoStore] = None,
        theme_manager: Any = None,
        plugin_manager: Any = None,
        cache_resolver: Any = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.export_dir = Path(export_dir)
        self.pages = pages
        self.settings = settings
        self.seo = seo
        self.theme_manager = theme_manager
        self.plugin_manager = plugin_manager
        self.cache_resolver = cache_resolver
        self.clock = clock

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_config(
        cls,
        config: Optional[ExportConfig] = None,
        *,
        theme_manager: Any = None,
        plugin_manager: Any = None,
        init_schema: bool = False,
    ) -> "Exporter":
        """
        Wire an Exporter from configuration: DB backend and stores,
        staging directory, and plugin cache location.
        """
        cfg = config or load_config()

        if cfg.enable_logging:
            logging.basicConfig(level=logging.INFO)
            logger.info("Initializing Exporter with config: %s", cfg)

        backend = ensure_backend(create_backend(cfg))
        pool = DBPool(backend)

        if init_schema:
            with pool.connection() as conn:
                backend.init_schema(conn)

        paths = StoragePaths.from_config(cfg)

        return cls(
            paths.export_dir,
            pages=PageStore(pool),
            settings=SettingsStore(pool),
            seo=SeoStore(pool),
            theme_manager=theme_manager,
            plugin_manager=plugin_manager,
            cache_resolver=paths,
        )

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    def collect(self, domain: Domain) -> CollectorResult:
        """
        Run one collector. An unexpected failure is logged and turned
        into the domain's UNAVAILABLE fallback so the archive still
        gets its manifest.
        """
        try:
            result = domain.collect(self)
        except Exception as exc:
            logger.exception("Collector for %s failed", domain.name)
            return domain.fallback(f"Export of {domain.name} failed: {exc}")

        if not result.is_ok:
            logger.warning("Domain %s unavailable: %s", domain.name, result.reason)
        return result

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def _open_archive(self, now: datetime) -> ArchiveWriter:
        try:
            directory = ensure_export_dir(self.export_dir)
        except OSError as exc:
            raise ExportInitError(
                f"Unable to create export directory {self.export_dir}: {exc}"
            ) from exc

        return ArchiveWriter(reserve_export_path(directory, now)).open()

    def create_export_zip(
        self,
        options: Union[ExportOptions, Mapping[str, Any], None] = None,
    ) -> ArchiveResult:
        if not isinstance(options, ExportOptions):
            options = ExportOptions.from_mapping(options)

        now = self.clock()
        writer = self._open_archive(now)
        run = _ExportRun(writer)
        logger.info("Export started: %s (%s)", writer.path.name, options)

        try:
            run.write(PAGES, self.collect(PAGES))
            run.advance(ExportStage.CONTENT_WRITTEN)

            for domain in OPTIONAL_DOMAINS:
                if domain.requested(options):
                    run.write(domain, self.collect(domain))
                run.advance(ExportStage.OPTIONAL_WRITES)

            manifest = ExportManifest.build(
                settings=options.include_settings,
                theme=options.include_theme,
                plugins=options.include_plugins,
                seo=SEO.name in run.written,
                generated_at=now,
            )
            writer.add_document(MANIFEST_ENTRY, manifest.to_dict())
            run.advance(ExportStage.MANIFEST_WRITTEN)

            writer.close()
            run.advance(ExportStage.FINALIZED)
        except BaseException:
            logger.error("Export %s aborted at stage %s", writer.path.name, run.stage.value)
            writer.discard()
            raise

        logger.info("Export finished: %s entries=%s", writer.path, writer.entries)
        return ArchiveResult(path=writer.path, filename=writer.path.name)


def create_exporter(
    config: Optional[ExportConfig] = None,
    *,
    theme_manager: Any = None,
    plugin_manager: Any = None,
    init_schema: bool = False,
) -> Exporter:
    """
    Convenience constructor used by the API and CLI.
    """
    return Exporter.from_config(
        config,
        theme_manager=theme_manager,
        plugin_manager=plugin_manager,
        init_schema=init_schema,
    )


__all__ = [
    "ExportOptions",
    "ArchiveResult",
    "ExportStage",
    "Domain",
    "DOMAINS",
    "Exporter",
    "create_exporter",
]

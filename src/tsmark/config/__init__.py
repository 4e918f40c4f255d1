# topmark:header:start
#
#   project      : TsMark
#   file         : __init__.py
#   file_relpath : src/tsmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for the TsMark tool.

This module defines the immutable `Config` snapshot and its mutable builder
`MutableConfig`, which merges layered configuration with clear precedence:

1. built-in defaults,
2. discovered ``pyproject.toml`` (``[tool.tsmark]``) and ``tsmark.toml`` files
   (root-most first, nearest last),
3. explicitly passed ``--config`` files,
4. CLI overrides.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tsmark.config.io import (
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
    load_defaults_dict,
    load_tool_table,
    load_toml_dict,
)
from tsmark.config.io.getters import get_bool_value
from tsmark.config.keys import Toml
from tsmark.config.logging import TsmarkLogger, get_logger
from tsmark.config.types import AmbiguousPolicy, ArgsLike
from tsmark.constants import (
    DEFAULT_CONTEXT_LINES,
    DEFAULT_MARKUP_EXTENSIONS,
    DEFAULT_TODO_PREFIX,
    DIRECTIVE_NOTE_TEMPLATE,
    PYPROJECT_TOML_NAME,
    TS_EXPECT_ERROR,
    TSMARK_TOML_NAME,
)

__all__ = [
    "AmbiguousPolicy",
    "ArgsLike",
    "Config",
    "MutableConfig",
]

logger: TsmarkLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for TsMark.

    This snapshot is produced by `MutableConfig.freeze` after merging defaults,
    project files, extra config files, and CLI overrides.

    Attributes:
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        todo (str): Prefix word embedded in the synthesized directive note.
        directive (str): Suppression directive token (``@ts-expect-error``).
        context (int): Number of lines before/after a target inspected by the markup heuristic.
        markup_extensions (tuple[str, ...]): File suffixes of markup-embedded dialects.
        ambiguous (AmbiguousPolicy): How markup-ambiguous sites are resolved.
        sample (int | None): Restrict processing to a random subset of this many diagnostics.
        seed (int | None): Seed for the sampler (reproducible subsets).
        dry (bool): Preview only; never write files.
        verbose (bool): Trace every read/write and every insertion.
        diff (bool): Show a unified diff per changed file.
        base_dir (Path | None): Directory against which relative report paths are resolved
            (None = current working directory).
    """

    # Provenance
    config_files: tuple[Path | str, ...]

    # Directive rendering
    todo: str
    directive: str

    # Markup heuristic
    context: int
    markup_extensions: tuple[str, ...]
    ambiguous: AmbiguousPolicy

    # Sampling
    sample: int | None
    seed: int | None

    # Runtime intent
    dry: bool
    verbose: bool
    diff: bool
    base_dir: Path | None

    @property
    def directive_note(self) -> str:
        """Return the synthesized directive line (without comment syntax)."""
        return DIRECTIVE_NOTE_TEMPLATE.format(directive=self.directive, todo=self.todo)

    def resolve_path(self, file_path: str) -> Path:
        """Resolve a path as written in the diagnostic report.

        Args:
            file_path (str): The path captured from a report line.

        Returns:
            Path: ``file_path`` itself when absolute or when no base directory is set,
            else the path joined onto `base_dir`.
        """
        p = Path(file_path)
        if p.is_absolute() or self.base_dir is None:
            return p
        return self.base_dir / p


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every layered field defaults to ``None`` meaning "not set by this layer"; `merge_with`
    only overrides fields that the other layer sets, and `freeze` falls back to the
    built-in defaults for anything still unset.
    """

    # Provenance
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # Directive rendering
    todo: str | None = None
    directive: str | None = None

    # Markup heuristic
    context: int | None = None
    markup_extensions: list[str] | None = None
    ambiguous: AmbiguousPolicy | None = None

    # Sampling
    sample: int | None = None
    seed: int | None = None

    # Runtime intent (CLI/API only)
    dry: bool = False
    verbose: bool = False
    diff: bool = False
    base_dir: Path | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze the draft into an immutable `Config` snapshot."""
        return Config(
            config_files=tuple(self.config_files),
            todo=self.todo if self.todo is not None else DEFAULT_TODO_PREFIX,
            directive=self.directive or TS_EXPECT_ERROR,
            context=self.context if self.context is not None else DEFAULT_CONTEXT_LINES,
            markup_extensions=(
                tuple(self.markup_extensions)
                if self.markup_extensions is not None
                else DEFAULT_MARKUP_EXTENSIONS
            ),
            ambiguous=self.ambiguous or AmbiguousPolicy.ASK,
            sample=self.sample,
            seed=self.seed,
            dry=self.dry,
            verbose=self.verbose,
            diff=self.diff,
            base_dir=self.base_dir,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the built-in defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict(), where="defaults")
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``tsmark.toml`` and ``pyproject.toml`` files, extracting the
        ``[tool.tsmark]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft if successful; None if a ``pyproject.toml``
                carries no TsMark section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        table: dict[str, Any] | None = load_tool_table(path)
        if table is None:
            return None

        where: str = (
            f"{path}[tool.tsmark]" if path.name == PYPROJECT_TOML_NAME else str(path)
        )
        draft: MutableConfig = cls.from_toml_dict(table, where=where)
        draft.config_files = [path]
        logger.trace("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(cls, data: dict[str, Any], *, where: str = "<dict>") -> MutableConfig:
        """Create a draft config from a parsed TsMark table.

        Mistyped values are reported as warnings and left unset so that lower layers
        keep their value.

        Args:
            data (dict[str, Any]): The TsMark table.
            where (str): Location of the table, used in warnings.

        Returns:
            MutableConfig: The resulting draft.
        """
        draft: MutableConfig = cls()

        draft.todo = get_string_value_or_none_checked(data, Toml.KEY_TODO, where=where)
        draft.directive = get_string_value_or_none_checked(data, Toml.KEY_DIRECTIVE, where=where)

        context: int | None = get_int_value_or_none_checked(data, Toml.KEY_CONTEXT, where=where)
        if context is not None and context < 0:
            logger.warning("Ignoring negative %s.%s: %d", where, Toml.KEY_CONTEXT, context)
            context = None
        draft.context = context

        draft.markup_extensions = get_string_list_value_or_none_checked(
            data, Toml.KEY_MARKUP_EXTENSIONS, where=where
        )

        raw_ambiguous: str | None = get_string_value_or_none_checked(
            data, Toml.KEY_AMBIGUOUS, where=where
        )
        if raw_ambiguous is not None:
            try:
                draft.ambiguous = AmbiguousPolicy(raw_ambiguous.strip().lower())
            except ValueError:
                logger.warning(
                    "Invalid %s.%s: %r (expected one of: %s)",
                    where,
                    Toml.KEY_AMBIGUOUS,
                    raw_ambiguous,
                    ", ".join(p.value for p in AmbiguousPolicy),
                )

        sample: int | None = get_int_value_or_none_checked(data, Toml.KEY_SAMPLE, where=where)
        if sample is not None and sample < 0:
            logger.warning("Ignoring negative %s.%s: %d", where, Toml.KEY_SAMPLE, sample)
            sample = None
        draft.sample = sample
        draft.seed = get_int_value_or_none_checked(data, Toml.KEY_SEED, where=where)

        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Layered discovery semantics:
          * We traverse from the anchor directory up to the filesystem root and
            collect config files in **root-most → nearest** order.
          * In a given directory, `pyproject.toml` comes first and `tsmark.toml`
            second so that the later merge gives `tsmark.toml` precedence.
          * If a discovered config sets ``root = true``, traversal stops after the
            current directory.

        Args:
            start (Path): The Path instance where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for stable merging.
        """
        found: list[Path] = []
        cur: Path = start.resolve()

        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            level: list[Path] = []

            for name in (PYPROJECT_TOML_NAME, TSMARK_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                if name == PYPROJECT_TOML_NAME:
                    data: dict[str, Any] = load_toml_dict(p)
                    tool: Any = data.get(Toml.SECTION_TOOL, {})
                    table: Any = tool.get(Toml.SECTION_TSMARK) if isinstance(tool, dict) else None
                    if not isinstance(table, dict):
                        # A pyproject.toml without [tool.tsmark] is not a TsMark config
                        continue
                else:
                    table = load_toml_dict(p)
                level.append(p)
                logger.debug("Discovered config file: %s", p)
                if get_bool_value(table, Toml.KEY_ROOT):
                    root_stop_here = True

            # Nearest directories are discovered first; prepend to keep root-most first
            found[0:0] = level

            parent: Path = cur.parent
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            if parent == cur:
                break
            cur = parent

        return found

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: list[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Build a draft by merging defaults, discovered files and extra config files.

        Args:
            start (Path | None): Directory where discovery starts (default: CWD).
            extra_config_files (list[Path] | None): Files passed explicitly (``--config``).
            no_config (bool): Skip discovery of project config files.

        Returns:
            MutableConfig: The merged draft (CLI overrides still to be applied).
        """
        draft: MutableConfig = cls.from_defaults()

        paths: list[Path] = []
        if not no_config:
            paths.extend(cls.discover_local_config_files(start or Path.cwd()))
        paths.extend(extra_config_files or [])

        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is None:
                continue
            draft = draft.merge_with(layer)

        logger.debug("Merged config sources: %s", draft.config_files)
        return draft

    # ------------------------------ Merging ------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Merge ``other`` into this draft (``other`` wins where it sets a value).

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: ``self``, updated in place for chaining.
        """
        self.config_files.extend(other.config_files)
        if other.todo is not None:
            self.todo = other.todo
        if other.directive is not None:
            self.directive = other.directive
        if other.context is not None:
            self.context = other.context
        if other.markup_extensions is not None:
            self.markup_extensions = list(other.markup_extensions)
        if other.ambiguous is not None:
            self.ambiguous = other.ambiguous
        if other.sample is not None:
            self.sample = other.sample
        if other.seed is not None:
            self.seed = other.seed
        return self

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI/API overrides on top of the merged file configuration.

        Keys whose value is ``None`` are treated as "not given" and leave the
        configured value untouched.

        Args:
            args (ArgsLike): Mapping with any of the keys ``todo``, ``directive``,
                ``context``, ``markup_extensions``, ``ambiguous``, ``sample``, ``seed``,
                ``dry``, ``verbose``, ``diff`` and ``base_dir``.

        Returns:
            MutableConfig: ``self``, updated in place for chaining.
        """
        overrides: MutableConfig = MutableConfig(
            config_files=[],
            todo=args.get("todo"),
            directive=args.get("directive"),
            context=args.get("context"),
            markup_extensions=args.get("markup_extensions"),
            ambiguous=args.get("ambiguous"),
            sample=args.get("sample"),
            seed=args.get("seed"),
        )
        self.merge_with(overrides)

        if args.get("dry") is not None:
            self.dry = bool(args["dry"])
        if args.get("verbose") is not None:
            self.verbose = bool(args["verbose"])
        if args.get("diff") is not None:
            self.diff = bool(args["diff"])
        if args.get("base_dir") is not None:
            self.base_dir = Path(args["base_dir"])
        return self

"""Entry-point configuration: validation and defaults.

validate_config() is the schema capability: raw mapping in, typed and
defaulted NgPackageConfig out. Stateless, invoked once per entry point.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ngpkg.domain.exceptions import ConfigSchemaError
from ngpkg.domain.model.frozen import freeze_mapping, thaw

CSS_URL_VALUES = frozenset({"inline", "none"})

# Keys every configuration ends up with after defaulting
DEFAULTS: Mapping[str, object] = {
    "dest": "dist",
    "deleteDestPath": True,
    "keepLifecycleScripts": False,
    "whitelistedNonPeerDependencies": [],
    "lib": {
        "entryFile": "src/public_api.ts",
        "flatModuleFile": None,
        "cssUrl": "inline",
        "comments": "none",
        "licensePath": None,
        "umdModuleIds": {},
        "embedded": [],
        "languageLevel": [],
    },
}

_IGNORED_KEYS = frozenset({"$schema"})


@dataclass(frozen=True, slots=True)
class LibOptions:
    """`lib` section of the entry-point configuration.

    Attributes:
        entry_file: Entry file relative to the entry point directory.
        flat_module_file: Flat module file name. None = derived from module id.
        css_url: How url() references in stylesheets are handled.
        comments: Comment policy for the bundles.
        license_path: License file injected into bundles. None = disabled.
        umd_module_ids: External module id -> UMD global name.
        embedded: Dependencies bundled into the UMD output.
        language_level: TypeScript lib entries.
    """

    entry_file: str = "src/public_api.ts"
    flat_module_file: str | None = None
    css_url: str = "inline"
    comments: str = "none"
    license_path: str | None = None
    umd_module_ids: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    embedded: tuple[str, ...] = ()
    language_level: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.entry_file:
            raise ConfigSchemaError(key="lib.entryFile", reason="must not be empty")
        if self.css_url not in CSS_URL_VALUES:
            raise ConfigSchemaError(
                key="lib.cssUrl",
                reason=f"must be one of {sorted(CSS_URL_VALUES)}, got {self.css_url!r}",
            )


@dataclass(frozen=True, slots=True)
class NgPackageConfig:
    """Validated entry-point configuration.

    Attributes:
        dest: Output directory, relative to the entry point directory.
        delete_dest_path: Clean dest before building.
        keep_lifecycle_scripts: Keep npm lifecycle scripts in the output manifest.
        whitelisted_non_peer_dependencies: Allowed non-peer dependencies.
        lib: `lib` section.
        extras: Unknown top-level keys, passed through untouched.
        values: Fully defaulted raw mapping backing get().
    """

    dest: str = "dist"
    delete_dest_path: bool = True
    keep_lifecycle_scripts: bool = False
    whitelisted_non_peer_dependencies: tuple[str, ...] = ()
    lib: LibOptions = field(default_factory=LibOptions)
    extras: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))
    values: Mapping[str, object] = field(
        default_factory=lambda: freeze_mapping(DEFAULTS),
        repr=False,
    )

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.dest:
            raise ConfigSchemaError(key="dest", reason="must not be empty")

    def get(self, key: str) -> object:
        """Look up a value by dotted key, e.g. "lib.entryFile".

        Raises:
            KeyError: If any segment of the key is unknown
        """
        if not key:
            raise KeyError(key)

        node: object = self.values
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                raise KeyError(key)
            node = node[part]
        return node


def validate_config(raw: Mapping[str, object]) -> NgPackageConfig:
    """Validate raw entry-point configuration and apply defaults.

    Args:
        raw: Entry-point configuration as read from disk (may be empty)

    Returns:
        NgPackageConfig with every documented key present

    Raises:
        ConfigSchemaError: If a value has the wrong type or is out of range
    """
    if not isinstance(raw, Mapping):
        raise ConfigSchemaError(key="<root>", reason=f"must be an object, got {type(raw).__name__}")

    merged = _merge_defaults(DEFAULTS, raw)

    lib = merged["lib"]
    if not isinstance(lib, Mapping):
        raise ConfigSchemaError(key="lib", reason=f"must be an object, got {type(lib).__name__}")

    lib_options = LibOptions(
        entry_file=_expect_str(lib, "entryFile", "lib"),
        flat_module_file=_expect_optional_str(lib, "flatModuleFile", "lib"),
        css_url=_expect_str(lib, "cssUrl", "lib"),
        comments=_expect_str(lib, "comments", "lib"),
        license_path=_expect_optional_str(lib, "licensePath", "lib"),
        umd_module_ids=MappingProxyType(_expect_str_mapping(lib, "umdModuleIds", "lib")),
        embedded=_expect_str_list(lib, "embedded", "lib"),
        language_level=_expect_str_list(lib, "languageLevel", "lib"),
    )

    extras = {k: v for k, v in raw.items() if k not in DEFAULTS and k not in _IGNORED_KEYS}

    return NgPackageConfig(
        dest=_expect_str(merged, "dest"),
        delete_dest_path=_expect_bool(merged, "deleteDestPath"),
        keep_lifecycle_scripts=_expect_bool(merged, "keepLifecycleScripts"),
        whitelisted_non_peer_dependencies=_expect_str_list(merged, "whitelistedNonPeerDependencies"),
        lib=lib_options,
        extras=freeze_mapping(extras),
        values=freeze_mapping(merged),
    )


def _merge_defaults(defaults: Mapping[str, object], raw: Mapping[str, object]) -> dict[str, object]:
    """Deep-merge raw over defaults. Nested objects merge, everything else replaces."""
    merged: dict[str, object] = {key: thaw(value) for key, value in defaults.items()}
    for key, value in raw.items():
        default = merged.get(key)
        if isinstance(default, Mapping) and isinstance(value, Mapping):
            merged[key] = _merge_defaults(default, value)
        else:
            merged[key] = thaw(value)
    return merged


def _qualify(key: str, section: str | None) -> str:
    return f"{section}.{key}" if section else key


def _expect_str(values: Mapping[str, object], key: str, section: str | None = None) -> str:
    value = values[key]
    if not isinstance(value, str):
        raise ConfigSchemaError(
            key=_qualify(key, section),
            reason=f"must be a string, got {type(value).__name__}",
        )
    return value


def _expect_optional_str(
    values: Mapping[str, object],
    key: str,
    section: str | None = None,
) -> str | None:
    if values[key] is None:
        return None
    return _expect_str(values, key, section)


def _expect_bool(values: Mapping[str, object], key: str, section: str | None = None) -> bool:
    value = values[key]
    if not isinstance(value, bool):
        raise ConfigSchemaError(
            key=_qualify(key, section),
            reason=f"must be a boolean, got {type(value).__name__}",
        )
    return value


def _expect_str_list(
    values: Mapping[str, object],
    key: str,
    section: str | None = None,
) -> tuple[str, ...]:
    value = values[key]
    if not isinstance(value, list | tuple) or not all(isinstance(item, str) for item in value):
        raise ConfigSchemaError(key=_qualify(key, section), reason="must be a list of strings")
    return tuple(value)


def _expect_str_mapping(
    values: Mapping[str, object],
    key: str,
    section: str | None = None,
) -> dict[str, str]:
    value = values[key]
    if not isinstance(value, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ConfigSchemaError(key=_qualify(key, section), reason="must map strings to strings")
    return dict(value)

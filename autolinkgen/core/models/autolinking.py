"""
Autolinking config model — the JSON document produced by dependency discovery.

The document is camelCase on disk; attributes here are snake_case with
camelCase aliases so either spelling is accepted when constructing.
Every model is frozen: descriptors are built once from the parsed
config and only ever read by the generators.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_MODEL_CONFIG = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

# Names of the three fields that together describe a C++ TurboModule
CXX_MODULE_FIELDS = (
    "cxx_module_header_name",
    "cxx_module_cmake_lists_module_name",
    "cxx_module_cmake_lists_path",
)


class AndroidDependency(BaseModel):
    """Android side of one third-party dependency.

    Only ``source_dir`` is required. Every other field is optional and
    the generators branch purely on whether it is present: a missing
    field means "this dependency contributes nothing here".
    """

    model_config = _MODEL_CONFIG

    source_dir: str = Field(alias="sourceDir")
    package_import_path: str | None = Field(default=None, alias="packageImportPath")
    package_instance: str | None = Field(default=None, alias="packageInstance")
    build_types: tuple[str, ...] = Field(default=(), alias="buildTypes")
    library_name: str | None = Field(default=None, alias="libraryName")
    component_descriptors: tuple[str, ...] = Field(default=(), alias="componentDescriptors")
    cmake_lists_path: str | None = Field(default=None, alias="cmakeListsPath")
    cxx_module_cmake_lists_module_name: str | None = Field(
        default=None, alias="cxxModuleCMakeListsModuleName"
    )
    cxx_module_cmake_lists_path: str | None = Field(
        default=None, alias="cxxModuleCMakeListsPath"
    )
    cxx_module_header_name: str | None = Field(default=None, alias="cxxModuleHeaderName")
    dependency_configuration: str | None = Field(
        default=None, alias="dependencyConfiguration"
    )
    is_pure_cxx_dependency: bool | None = Field(default=None, alias="isPureCxxDependency")

    @property
    def has_module_provider(self) -> bool:
        """True when the dependency ships a Java TurboModule provider."""
        return (
            self.library_name is not None
            and self.package_import_path is not None
            and self.package_instance is not None
        )

    @property
    def has_cxx_module(self) -> bool:
        return self.cxx_module_header_name is not None

    @property
    def has_component_descriptors(self) -> bool:
        """Component registration needs the library name for its header path."""
        return self.library_name is not None and bool(self.component_descriptors)

    def cxx_module_fields_set(self) -> list[str]:
        """Return the names of the C++ module fields that are present."""
        return [name for name in CXX_MODULE_FIELDS if getattr(self, name) is not None]


class DependencyPlatforms(BaseModel):
    """Per-platform configuration of a dependency (only Android is read)."""

    model_config = _MODEL_CONFIG

    android: AndroidDependency | None = None


class Dependency(BaseModel):
    """A discovered dependency, keyed by package name in the config."""

    model_config = _MODEL_CONFIG

    root: str = ""
    name: str = ""
    platforms: DependencyPlatforms | None = None


class AndroidProject(BaseModel):
    """Android settings of the host application (informational)."""

    model_config = _MODEL_CONFIG

    source_dir: str | None = Field(default=None, alias="sourceDir")
    app_name: str | None = Field(default=None, alias="appName")
    package_name: str | None = Field(default=None, alias="packageName")
    application_id: str | None = Field(default=None, alias="applicationId")
    main_activity: str | None = Field(default=None, alias="mainActivity")
    watch_mode_command_params: tuple[str, ...] | None = Field(
        default=None, alias="watchModeCommandParams"
    )
    dependency_configuration: str | None = Field(
        default=None, alias="dependencyConfiguration"
    )


class ProjectConfig(BaseModel):
    model_config = _MODEL_CONFIG

    android: AndroidProject | None = None


class AutolinkingConfig(BaseModel):
    """Root of the autolinking config document.

    ``dependencies`` preserves the document's key order, which is the
    order every generated artifact lists the dependencies in.
    """

    model_config = _MODEL_CONFIG

    react_native_version: str = Field(default="", alias="reactNativeVersion")
    dependencies: dict[str, Dependency] | None = None
    project: ProjectConfig | None = None

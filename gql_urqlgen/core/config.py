"""Configuration for the urql code generator.

Options use the camelCase names from codegen configuration files
(``withHooks``, ``importOperationTypesFrom``, ...) and are also accepted
under their snake_case attribute names:

    config = UrqlPluginConfig.model_validate({"withComponent": True})
    config = UrqlPluginConfig(with_loaders="~/client#urqlClient")
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

# The only value of importOperationTypesFrom that generated imports are known to agree with
DEFAULT_OPERATIONS_NAMESPACE = "Operations"


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be read or validated."""


class DocumentMode(str, Enum):
    """How operation documents are made available to the generated module."""
    GRAPHQL_TAG = "graphQLTag"
    DOCUMENT_NODE = "documentNode"
    EXTERNAL = "external"


class UrqlPluginConfig(BaseModel):
    """Immutable settings for one generation run."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    with_component: bool = False
    with_hooks: bool = True
    # True/False, or "<module>#<export>" naming a request-bound client instance
    with_loaders: bool | str = False
    urql_import_from: str | None = None
    document_mode: DocumentMode = DocumentMode.GRAPHQL_TAG
    import_document_node_externally_from: str | None = None
    import_operation_types_from: str | None = None
    omit_operation_suffix: bool = False
    dedupe_operation_suffix: bool = False
    types_prefix: str = ""
    document_variable_suffix: str = "Document"

    @property
    def loaders_enabled(self) -> bool:
        return bool(self.with_loaders)

    @property
    def loaders_client_import(self) -> tuple[str, str] | None:
        """Return (module, export) for the client import of loaders, if configured."""
        if not isinstance(self.with_loaders, str) or not self.with_loaders:
            return None
        source, _, export = self.with_loaders.partition("#")
        return source, export or "default"

    @property
    def client_import_source(self) -> str:
        return self.urql_import_from or "urql"

    @property
    def external_import_prefix(self) -> str:
        """Prefix for document/result/variables references, e.g. 'Operations.'."""
        if self.import_operation_types_from:
            return f"{self.import_operation_types_from}."
        return ""

    @property
    def document_import_prefix(self) -> str:
        """Prefix for document references; external documents live in the Operations import."""
        if self.external_import_prefix:
            return self.external_import_prefix
        if self.document_mode is DocumentMode.EXTERNAL and self.import_document_node_externally_from:
            return f"{DEFAULT_OPERATIONS_NAMESPACE}."
        return ""

    @property
    def any_artifact_enabled(self) -> bool:
        return self.with_component or self.with_hooks or self.loaders_enabled

    def consistency_warnings(self) -> list[str]:
        """Return non-fatal warnings about conflicting options."""
        warnings = []
        if not self.import_operation_types_from:
            return warnings

        if (
            self.document_mode is not DocumentMode.EXTERNAL
            or not self.import_document_node_externally_from
        ):
            warnings.append(
                '"importOperationTypesFrom" should be used with "documentMode=external" '
                'and "importDocumentNodeExternallyFrom"'
            )
        if self.import_operation_types_from != DEFAULT_OPERATIONS_NAMESPACE:
            warnings.append(
                "importOperationTypesFrom only works correctly when left empty "
                f'or set to "{DEFAULT_OPERATIONS_NAMESPACE}"'
            )
        return warnings


def load_config(config_path: Path) -> UrqlPluginConfig:
    """Load configuration from a JSON file.

    A missing file yields the default configuration.

    Raises:
        ConfigError: If the file cannot be read or fails validation.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        return UrqlPluginConfig()

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Unable to read {config_path}: {e}") from e

    try:
        return UrqlPluginConfig.model_validate_json(content)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e

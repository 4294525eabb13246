"""Import statements for generated modules."""

from .config import DocumentMode, UrqlPluginConfig

OMIT_TYPE = "export type Omit<T, K extends keyof T> = Pick<T, Exclude<keyof T, K>>;"

REACT_IMPORT = "import * as React from 'react';"
REACT_ROUTER_IMPORT = "import * as ReactRouter from 'react-router';"


def base_imports(config: UrqlPluginConfig) -> list[str]:
    """Return the imports the document declarations need."""
    if config.document_mode is DocumentMode.GRAPHQL_TAG:
        return ["import gql from 'graphql-tag';"]
    if config.document_mode is DocumentMode.DOCUMENT_NODE:
        return ["import { DocumentNode } from 'graphql';"]
    if config.import_document_node_externally_from:
        return [f"import * as Operations from '{config.import_document_node_externally_from}';"]
    return []


def synthesize_imports(
    config: UrqlPluginConfig,
    base: list[str],
    has_operations: bool,
) -> list[str]:
    """Append the imports the enabled artifacts rely on to ``base``.

    Nothing is added when there are no operations, whatever the configuration.

    Args:
        config: Run configuration
        base: Imports supplied by the surrounding pipeline; never modified
        has_operations: Whether any operation was collected

    Returns:
        A new list starting with ``base``
    """
    if not has_operations:
        return list(base)

    imports = []
    if config.with_component:
        imports.append(REACT_IMPORT)
    if config.loaders_enabled:
        imports.append(REACT_ROUTER_IMPORT)
    client_import = config.loaders_client_import
    if client_import:
        source, export = client_import
        imports.append(f"import {{ {export} as client }} from '{source}';")
    if config.any_artifact_enabled:
        imports.append(f"import * as Urql from '{config.client_import_source}';")
    imports.append(OMIT_TYPE)

    return [*base, *imports]

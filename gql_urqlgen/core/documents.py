"""Document variable declarations for generated modules.

Every artifact refers to a document variable such as ``GetUserDocument``.
Depending on the document mode it is declared as a ``gql`` tagged template,
as a plain ``DocumentNode`` object, or imported from another module.
"""

import json
from enum import Enum
from typing import Any

from graphql import parse, print_ast
from graphql.utilities import ast_to_dict
from pydantic.alias_generators import to_camel, to_pascal

from .config import DocumentMode, UrqlPluginConfig
from .ir import IROperation


def escape_template_literal(text: str) -> str:
    """Escape text for use inside a JavaScript template literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def to_js_ast(value: Any) -> Any:
    """Convert graphql-core's ``ast_to_dict`` output to the graphql-js node shape.

    graphql-core spells kinds and keys in snake_case ('operation_definition',
    'selection_set'); graphql-js uses 'OperationDefinition' and 'selectionSet'.
    """
    if isinstance(value, dict):
        converted = {}
        for key, item in value.items():
            # graphql-js omits absent optional children such as "alias"
            if item is None:
                continue
            if key == "kind":
                converted[key] = to_pascal(item)
            else:
                converted[to_camel(key)] = to_js_ast(item)
        return converted
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [to_js_ast(item) for item in value]
    return value


class DocumentEmitter:
    """Declares the document variable for an operation."""

    def __init__(self, config: UrqlPluginConfig):
        self.config = config

    @staticmethod
    def document_source(operation: IROperation) -> str:
        """Return the printed document, falling back to the parsed definition."""
        if operation.source:
            return operation.source
        if operation.definition is not None:
            return print_ast(operation.definition)
        return ""

    def render(self, operation: IROperation) -> str:
        source = self.document_source(operation)
        if not source or not operation.document_variable_name:
            return ""

        name = operation.document_variable_name
        if self.config.document_mode is DocumentMode.GRAPHQL_TAG:
            body = escape_template_literal(source.strip())
            return f"export const {name} = gql`\n{body}\n`;"
        if self.config.document_mode is DocumentMode.DOCUMENT_NODE:
            document = to_js_ast(ast_to_dict(parse(source, no_location=True)))
            return f"export const {name} = {json.dumps(document)} as unknown as DocumentNode;"
        # External documents are imported, not declared
        return ""

"""GraphQL operation document parser using graphql-core.

Parses .graphql/.gql documents and produces one IROperation per query,
mutation or subscription definition, with the document variable, result
type and variables type names already resolved.
"""

import os

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    GraphQLSyntaxError,
    NonNullTypeNode,
    OperationDefinitionNode,
    VariableDefinitionNode,
    Visitor,
    parse,
    print_ast,
    visit,
)

from ..logging import get_logger
from .config import UrqlPluginConfig
from .ir import IROperation, IRVariable, OperationType
from .naming import DefaultNamingConvention, NamingConvention

logger = get_logger("parser")

DOCUMENT_EXTENSIONS = (".graphql", ".gql")


class DocumentParseError(ValueError):
    """Raised when an operation document is not valid GraphQL."""

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        super().__init__(f"Error parsing {file_name}: {message}")


class _FragmentSpreadCollector(Visitor):
    """Collects the names of fragments spread anywhere in a node."""

    def __init__(self):
        super().__init__()
        self.names: set[str] = set()

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args):
        self.names.add(node.name.value)


class DocumentParser:
    """Parses operation documents into IR."""

    def __init__(
        self,
        documents_path: str,
        config: UrqlPluginConfig | None = None,
        naming: NamingConvention | None = None,
    ):
        """Initialize a parser with a path to a document file or directory."""
        self.documents_path = documents_path
        self.config = config or UrqlPluginConfig()
        self.naming = naming or DefaultNamingConvention(self.config)
        self.fragments: dict[str, FragmentDefinitionNode] = {}

    def parse_all(self) -> list[IROperation]:
        """Parse all documents and return their operations in file order."""
        documents = []
        for file_path in self._collect_document_files():
            with open(file_path, encoding="utf-8") as f:
                documents.append(self.parse_document(f.read(), os.path.basename(file_path)))

        # Fragments may live in any file, so spreads are resolved after all are read
        for document in documents:
            for definition in document.definitions:
                if isinstance(definition, FragmentDefinitionNode):
                    self.fragments[definition.name.value] = definition

        operations = []
        for document in documents:
            for definition in document.definitions:
                if isinstance(definition, OperationDefinitionNode):
                    operations.append(self._process_operation(definition))
        logger.debug("Parsed %d operation(s) from %d document(s)", len(operations), len(documents))
        return operations

    def parse_source(self, source: str, file_name: str = "<string>") -> list[IROperation]:
        """Parse operations from a single in-memory document."""
        document = self.parse_document(source, file_name)
        for definition in document.definitions:
            if isinstance(definition, FragmentDefinitionNode):
                self.fragments[definition.name.value] = definition
        return [
            self._process_operation(definition)
            for definition in document.definitions
            if isinstance(definition, OperationDefinitionNode)
        ]

    @staticmethod
    def parse_document(source: str, file_name: str) -> DocumentNode:
        try:
            return parse(source)
        except GraphQLSyntaxError as e:
            logger.error("Error parsing %s: %s", file_name, e.message)
            raise DocumentParseError(file_name, e.message) from e

    def _collect_document_files(self) -> list[str]:
        """Collect all operation documents from path."""
        files = []
        if os.path.isfile(self.documents_path):
            if self.documents_path.endswith(DOCUMENT_EXTENSIONS):
                files.append(self.documents_path)
        else:
            for root, _, filenames in os.walk(self.documents_path):
                for filename in filenames:
                    if filename.endswith(DOCUMENT_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)

    def _process_operation(self, node: OperationDefinitionNode) -> IROperation:
        name = node.name.value if node.name else ""
        operation_type = OperationType.from_keyword(node.operation.value)
        suffix = self.naming.get_operation_suffix(name, operation_type)
        result_type = self.naming.convert_name(name, suffix=suffix)

        return IROperation(
            name=name,
            operation_type=operation_type,
            variables=[self._process_variable(v) for v in node.variable_definitions or ()],
            document_variable_name=self.naming.convert_name(
                name, suffix=self.config.document_variable_suffix, use_types_prefix=False
            ),
            result_type=result_type,
            variables_type=f"{result_type}Variables",
            source=self._print_with_fragments(node),
            definition=node,
        )

    @staticmethod
    def _process_variable(node: VariableDefinitionNode) -> IRVariable:
        return IRVariable(
            name=node.variable.name.value,
            type_name=print_ast(node.type),
            is_optional=not isinstance(node.type, NonNullTypeNode),
            default_value=print_ast(node.default_value) if node.default_value else None,
        )

    def _print_with_fragments(self, node: OperationDefinitionNode) -> str:
        """Print the operation followed by every fragment it uses, transitively."""
        printed = [print_ast(node)]
        seen: set[str] = set()
        pending = self._spread_names(node)
        while pending:
            name = pending.pop()
            if name in seen:
                continue
            seen.add(name)
            fragment = self.fragments.get(name)
            if fragment is None:
                logger.warning("Unknown fragment %r", name)
                continue
            printed.append(print_ast(fragment))
            pending.extend(self._spread_names(fragment))
        return "\n\n".join(printed)

    @staticmethod
    def _spread_names(node) -> list[str]:
        collector = _FragmentSpreadCollector()
        visit(node, collector)
        return sorted(collector.names)

"""Per-operation assembly of urql artifacts."""

from ..logging import get_logger
from .config import UrqlPluginConfig
from .imports import synthesize_imports
from .ir import IROperation
from .naming import DefaultNamingConvention, NamingConvention
from .renderers import ArtifactRenderer, OperationReferences

logger = get_logger("visitor")


class UrqlVisitor:
    """Builds the component, hook and loader declarations for each operation.

    Artifacts are rendered independently from the same facts, always in the
    order component, hook, loaders.

    Example:
        visitor = UrqlVisitor(UrqlPluginConfig(with_loaders=True))
        code = visitor.build_operation(operation)
        imports = visitor.get_imports(["import gql from 'graphql-tag';"])
    """

    def __init__(
        self,
        config: UrqlPluginConfig | None = None,
        naming: NamingConvention | None = None,
        renderer: ArtifactRenderer | None = None,
    ):
        self.config = config or UrqlPluginConfig()
        self.naming = naming or DefaultNamingConvention(self.config)
        self.renderer = renderer or ArtifactRenderer(self.naming)
        self._collected_operations: list[IROperation] = []

        for message in self.config.consistency_warnings():
            logger.warning(message)

    @property
    def collected_operations(self) -> list[IROperation]:
        return list(self._collected_operations)

    def references(self, operation: IROperation) -> OperationReferences:
        """Return the operation's identifiers with any external prefix applied."""
        prefix = self.config.external_import_prefix
        return OperationReferences(
            document=self.config.document_import_prefix + operation.document_variable_name,
            result_type=prefix + operation.result_type,
            variables_type=prefix + operation.variables_type,
        )

    def build_operation(self, operation: IROperation) -> str:
        """Render every enabled artifact for ``operation``, joined by blank lines."""
        self._collected_operations.append(operation)
        refs = self.references(operation)

        artifacts = []
        if self.config.with_component:
            artifacts.append(self.renderer.render_component(operation, refs))
        if self.config.with_hooks:
            artifacts.append(self.renderer.render_hook(operation, refs))
        if self.config.loaders_enabled:
            artifacts.append(self.renderer.render_loaders(operation, refs))

        logger.debug(
            "Rendered %d artifact(s) for %s %r",
            len([a for a in artifacts if a]),
            operation.operation_type.value,
            operation.name,
        )
        return "\n\n".join(a for a in artifacts if a)

    def get_imports(self, base: list[str]) -> list[str]:
        """Return ``base`` plus the imports the collected operations need."""
        return synthesize_imports(
            self.config, base, has_operations=len(self._collected_operations) > 0
        )

"""Module generator for urql bindings.

Combines document declarations, per-operation artifacts and imports into
a single TypeScript module.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(operations, config, template_dir="./my_templates")
"""

import os

from ..logging import get_logger
from .config import UrqlPluginConfig
from .documents import DocumentEmitter
from .hooks import HookRunner
from .imports import base_imports
from .ir import IROperation
from .naming import DefaultNamingConvention
from .renderers import ArtifactRenderer
from .visitor import UrqlVisitor

logger = get_logger("generator")


class CodeGenerator:
    """Generates a TypeScript module from parsed operations.

    Example:
        operations = DocumentParser("./src/graphql", config).parse_all()
        generator = CodeGenerator(operations, config)
        generator.generate("./src/generated/graphql.tsx")
    """

    def __init__(
        self,
        operations: list[IROperation],
        config: UrqlPluginConfig | None = None,
        template_dir: str | None = None,
        hook_runner: HookRunner | None = None,
    ):
        """Initialize the code generator.

        Args:
            operations: Operations to generate bindings for
            config: Run configuration (defaults apply when omitted)
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
            hook_runner: Optional pre/post generation hooks
        """
        self.config = config or UrqlPluginConfig()
        self.hook_runner = hook_runner or HookRunner()
        self.operations = self.hook_runner.run_pre_hooks(list(operations))
        self.template_dir = template_dir

    def _new_visitor(self) -> UrqlVisitor:
        naming = DefaultNamingConvention(self.config)
        renderer = ArtifactRenderer(naming, template_dir=self.template_dir)
        return UrqlVisitor(self.config, naming=naming, renderer=renderer)

    def generate_code(self) -> str:
        """Generate the complete module text."""
        visitor = self._new_visitor()
        documents = DocumentEmitter(self.config)

        blocks = []
        for operation in self.operations:
            blocks.append(documents.render(operation))
            blocks.append(visitor.build_operation(operation))

        # Nothing references a document import when there are no operations
        base = base_imports(self.config) if self.operations else []
        sections = ["\n".join(visitor.get_imports(base))]
        sections.extend(block for block in blocks if block)
        logger.debug("Generated bindings for %d operation(s)", len(self.operations))
        body = "\n\n".join(section for section in sections if section)
        return body + "\n" if body else ""

    def generate(self, output_path: str) -> str:
        """Generate the module, run post hooks, and write it to ``output_path``.

        Returns:
            The content written
        """
        content = self.hook_runner.run_post_hooks(
            os.path.basename(output_path), self.generate_code()
        )
        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info("Wrote %s", output_path)
        return content

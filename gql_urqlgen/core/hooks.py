"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can modify
the operation list before generation or transform the generated module after.

Example usage:
    from gql_urqlgen.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to drop internal operations
    class SkipInternal(PreGenerateHook):
        def pre_generate(self, operations):
            return [op for op in operations if not op.name.startswith("_")]

    # Post-generation hook to add headers
    class AddLicenseHeader(PostGenerateHook):
        def post_generate(self, filename, content):
            header = "// Copyright 2024 My Company\\n\\n"
            return header + content
"""

from typing import Protocol, runtime_checkable

from .ir import IROperation, OperationType


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the parsed operations before code generation
    and return the operations to generate code for.
    """

    def pre_generate(self, operations: list[IROperation]) -> list[IROperation]:
        """Called before code generation.

        Args:
            operations: The parsed operations

        Returns:
            The (possibly filtered) operations to use for generation
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated module and can transform
    it before it's written to disk.

    Example:
        class Prettier(PostGenerateHook):
            def post_generate(self, filename: str, content: str) -> str:
                return run_prettier(filename, content)
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after code generation.

        Args:
            filename: The name of the generated file (e.g., "graphql.tsx")
            content: The generated code content

        Returns:
            The (possibly transformed) code to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to generated files.

    Example:
        hook = AddHeaderHook("/* Auto-generated - do not edit */")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the file."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterOperationsHook:
    """Built-in hook to filter operations by name prefix/suffix or kind.

    Example:
        # Only generate queries and mutations, skipping names starting with underscore
        hook = FilterOperationsHook(
            exclude_prefix="_",
            operation_types=[OperationType.QUERY, OperationType.MUTATION],
        )
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
        operation_types: list[OperationType] | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix
        self.operation_types = (
            {OperationType(t) for t in operation_types} if operation_types else None
        )

    def _should_include(self, operation: IROperation) -> bool:
        """Check if an operation should be included."""
        name = operation.name
        if self.operation_types and operation.operation_type not in self.operation_types:
            return False
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(self, operations: list[IROperation]) -> list[IROperation]:
        """Filter operations."""
        return [op for op in operations if self._should_include(op)]


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, operations: list[IROperation]) -> list[IROperation]:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            operations = hook.pre_generate(operations)
        return operations

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content

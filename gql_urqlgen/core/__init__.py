"""Core modules for urql code generation."""

from .analysis import RequirednessPolicy, compose_generics, is_variables_required
from .config import ConfigError, DocumentMode, UrqlPluginConfig, load_config
from .documents import DocumentEmitter
from .generator import CodeGenerator
from .hooks import (
    AddHeaderHook,
    FilterOperationsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .imports import OMIT_TYPE, base_imports, synthesize_imports
from .ir import IROperation, IRVariable, OperationType
from .naming import DefaultNamingConvention, NamingConvention, pascal_case
from .parser import DocumentParseError, DocumentParser
from .renderers import ArtifactRenderer, OperationReferences
from .visitor import UrqlVisitor

__all__ = [
    # IR types
    "IROperation",
    "IRVariable",
    "OperationType",
    # Configuration
    "ConfigError",
    "DocumentMode",
    "UrqlPluginConfig",
    "load_config",
    # Naming
    "DefaultNamingConvention",
    "NamingConvention",
    "pascal_case",
    # Analysis
    "RequirednessPolicy",
    "compose_generics",
    "is_variables_required",
    # Rendering
    "ArtifactRenderer",
    "OperationReferences",
    "DocumentEmitter",
    "UrqlVisitor",
    # Imports
    "OMIT_TYPE",
    "base_imports",
    "synthesize_imports",
    # Parser
    "DocumentParseError",
    "DocumentParser",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterOperationsHook",
    "HookRunner",
    # Generator
    "CodeGenerator",
]

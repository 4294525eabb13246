"""Artifact renderers for urql components, hooks and react-router loaders.

Each artifact is a Jinja2 template. Names, generic arguments and parameter
optionality are decided here, in Python, so the templates only interpolate.

Supports custom templates via the template_dir parameter:
    renderer = ArtifactRenderer(naming, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

from dataclasses import dataclass
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .analysis import RequirednessPolicy, compose_generics, is_variables_required, optional_marker
from .ir import IROperation, OperationType
from .naming import NamingConvention


@dataclass(frozen=True)
class OperationReferences:
    """Identifiers an artifact refers to, with any external prefix applied."""
    document: str
    result_type: str
    variables_type: str


def promise_like(type_expr: str) -> str:
    return f"{type_expr} | PromiseLike<{type_expr}>"


def options_factory(type_expr: str, args_type: str) -> str:
    """A value of ``type_expr`` or a (possibly async) function producing one."""
    return f"{type_expr} | ((args: {args_type}) => {promise_like(type_expr)})"


def loader_context_type(variables_type: str) -> str:
    return f"Partial<Urql.OperationContext> & {{ variables?: {variables_type} }}"


class ArtifactRenderer:
    """Renders the source text of each artifact for one operation.

    Available templates to override:
        - component.tsx.j2: urql render-prop component
        - hook_query.ts.j2: useQuery wrapper
        - hook_mutation.ts.j2: useMutation wrapper
        - hook_subscription.ts.j2: useSubscription wrapper
        - loader_query.ts.j2: react-router loader and useLoaderData reader
        - loader_mutation.ts.j2: react-router action and useActionData reader
    """

    HOOK_TEMPLATES = {
        OperationType.QUERY: "hook_query.ts.j2",
        OperationType.MUTATION: "hook_mutation.ts.j2",
        OperationType.SUBSCRIPTION: "hook_subscription.ts.j2",
    }

    def __init__(self, naming: NamingConvention, template_dir: str | None = None):
        """Initialize the renderer.

        Args:
            naming: Naming convention used to derive declared identifiers
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        self.naming = naming

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_urqlgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
        )

    def _render(self, template_name: str, **context) -> str:
        return self.env.get_template(template_name).render(**context).strip()

    def operation_name(self, operation: IROperation) -> str:
        """Return the base name of hooks and loaders, e.g. 'GetUserQuery'."""
        return self.naming.convert_name(
            operation.name,
            suffix=self.naming.get_operation_suffix(operation.name, operation.operation_type),
            use_types_prefix=False,
        )

    def render_component(self, operation: IROperation, refs: OperationReferences) -> str:
        component_name = self.naming.convert_name(
            operation.name, suffix="Component", use_types_prefix=False
        )
        generics = compose_generics(
            operation.operation_type, refs.result_type, refs.variables_type
        )
        required = is_variables_required(operation.variables, RequirednessPolicy.STRICT)
        return self._render(
            "component.tsx.j2",
            component_name=component_name,
            operation_type=operation.operation_type.value,
            generics=", ".join(generics),
            optional=optional_marker(required),
            variables_type=refs.variables_type,
            document=refs.document,
        )

    def render_hook(self, operation: IROperation, refs: OperationReferences) -> str:
        operation_type = operation.operation_type
        data_type = "TData" if operation_type is OperationType.SUBSCRIPTION else None
        generics = compose_generics(
            operation_type, refs.result_type, refs.variables_type, data_type=data_type
        )
        # Only the query template declares an optional options parameter
        required = is_variables_required(operation.variables, RequirednessPolicy.STRICT)
        return self._render(
            self.HOOK_TEMPLATES[operation_type],
            operation_name=self.operation_name(operation),
            operation_type=operation_type.value,
            generics=", ".join(generics),
            optional=optional_marker(required),
            result_type=refs.result_type,
            variables_type=refs.variables_type,
            document=refs.document,
        )

    def render_loaders(self, operation: IROperation, refs: OperationReferences) -> str:
        operation_type = operation.operation_type
        if operation_type is OperationType.SUBSCRIPTION:
            # react-router has no subscription lifecycle
            return ""

        if operation_type is OperationType.MUTATION:
            template_name = "loader_mutation.ts.j2"
            args_type = "ReactRouter.ActionFunctionArgs"
        else:
            template_name = "loader_query.ts.j2"
            args_type = "ReactRouter.LoaderFunctionArgs"

        context_type = loader_context_type(refs.variables_type)
        required = is_variables_required(operation.variables, RequirednessPolicy.LENIENT)
        return self._render(
            template_name,
            operation_name=self.operation_name(operation),
            generics=", ".join(compose_generics(
                operation_type, refs.result_type, refs.variables_type
            )),
            optional=optional_marker(required),
            options_type=options_factory(f"({context_type})", args_type),
            context_type=context_type,
            document=refs.document,
        )

"""Unit tests for the artifact renderers."""

import pytest

from gql_urqlgen.core.ir import IROperation, IRVariable, OperationType
from gql_urqlgen.core.naming import DefaultNamingConvention
from gql_urqlgen.core.renderers import ArtifactRenderer, OperationReferences


# =============================================================================
# Fixtures
# =============================================================================


def make_operation(kind, name, variables=()):
    suffix = kind.value
    return IROperation(
        name=name,
        operation_type=kind,
        variables=list(variables),
        document_variable_name=f"{name}Document",
        result_type=f"{name}{suffix}",
        variables_type=f"{name}{suffix}Variables",
    )


def refs_for(operation):
    return OperationReferences(
        document=operation.document_variable_name,
        result_type=operation.result_type,
        variables_type=operation.variables_type,
    )


REQUIRED_ID = IRVariable(name="id", type_name="ID!", is_optional=False)
DEFAULTED_LIMIT = IRVariable(name="limit", type_name="Int!", is_optional=False, default_value="10")
NULLABLE_FILTER = IRVariable(name="filter", type_name="String")


@pytest.fixture
def renderer():
    return ArtifactRenderer(DefaultNamingConvention())


@pytest.fixture
def get_user():
    """Query with one required variable."""
    return make_operation(OperationType.QUERY, "GetUser", [REQUIRED_ID])


@pytest.fixture
def list_users():
    """Query whose only non-null variable has a default."""
    return make_operation(OperationType.QUERY, "ListUsers", [DEFAULTED_LIMIT, NULLABLE_FILTER])


@pytest.fixture
def rename_user():
    """Mutation with a required variable."""
    return make_operation(OperationType.MUTATION, "RenameUser", [REQUIRED_ID])


@pytest.fixture
def on_user_renamed():
    """Subscription without variables."""
    return make_operation(OperationType.SUBSCRIPTION, "OnUserRenamed")


# =============================================================================
# Tests: Component
# =============================================================================


class TestRenderComponent:
    """Tests for render_component."""

    def test_query_component(self, renderer, get_user):
        code = renderer.render_component(get_user, refs_for(get_user))
        assert code == (
            "export const GetUserComponent = (props: Omit<Urql.QueryProps<GetUserQuery, "
            "GetUserQueryVariables>, 'query'> & { variables: GetUserQueryVariables }) => (\n"
            "  <Urql.Query {...props} query={GetUserDocument} />\n"
            ");"
        )

    def test_variables_optional_without_non_null(self, renderer):
        op = make_operation(OperationType.QUERY, "Search", [NULLABLE_FILTER])
        code = renderer.render_component(op, refs_for(op))
        assert "{ variables?: SearchQueryVariables }" in code

    def test_defaulted_non_null_makes_variables_required(self, renderer, list_users):
        code = renderer.render_component(list_users, refs_for(list_users))
        assert "{ variables: ListUsersQueryVariables }" in code

    def test_subscription_component_has_three_generics(self, renderer, on_user_renamed):
        code = renderer.render_component(on_user_renamed, refs_for(on_user_renamed))
        assert (
            "Urql.SubscriptionProps<OnUserRenamedSubscription, OnUserRenamedSubscription, "
            "OnUserRenamedSubscriptionVariables>" in code
        )
        assert "<Urql.Subscription {...props} query={OnUserRenamedDocument} />" in code

    def test_mutation_component_has_two_generics(self, renderer, rename_user):
        code = renderer.render_component(rename_user, refs_for(rename_user))
        assert "Urql.MutationProps<RenameUserMutation, RenameUserMutationVariables>" in code
        assert "{ variables: RenameUserMutationVariables }" in code

    def test_anonymous_operation(self, renderer):
        op = make_operation(OperationType.QUERY, "")
        code = renderer.render_component(op, refs_for(op))
        assert code.startswith("export const Component = ")


# =============================================================================
# Tests: Hooks
# =============================================================================


class TestRenderHook:
    """Tests for render_hook."""

    def test_query_hook(self, renderer, get_user):
        code = renderer.render_hook(get_user, refs_for(get_user))
        assert code == (
            "export function useGetUserQuery(options: Omit<Urql.UseQueryArgs<GetUserQueryVariables>, "
            "'query'>) {\n"
            "  return Urql.useQuery<GetUserQuery, GetUserQueryVariables>"
            "({ query: GetUserDocument, ...options });\n"
            "};"
        )

    def test_query_hook_optional_options(self, renderer):
        op = make_operation(OperationType.QUERY, "Search", [NULLABLE_FILTER])
        code = renderer.render_hook(op, refs_for(op))
        assert "export function useSearchQuery(options?: " in code

    def test_query_hook_strict_with_default(self, renderer, list_users):
        code = renderer.render_hook(list_users, refs_for(list_users))
        assert "export function useListUsersQuery(options: " in code

    def test_mutation_hook(self, renderer, rename_user):
        code = renderer.render_hook(rename_user, refs_for(rename_user))
        assert code == (
            "export function useRenameUserMutation() {\n"
            "  return Urql.useMutation<RenameUserMutation, RenameUserMutationVariables>"
            "(RenameUserDocument);\n"
            "};"
        )

    def test_subscription_hook(self, renderer, on_user_renamed):
        code = renderer.render_hook(on_user_renamed, refs_for(on_user_renamed))
        assert code.startswith(
            "export function useOnUserRenamedSubscription<TData = OnUserRenamedSubscription>("
            "options: Omit<Urql.UseSubscriptionArgs<OnUserRenamedSubscriptionVariables>, 'query'> = {}, "
            "handler?: Urql.SubscriptionHandler<OnUserRenamedSubscription, TData>) {"
        )
        assert (
            "return Urql.useSubscription<OnUserRenamedSubscription, TData, "
            "OnUserRenamedSubscriptionVariables>({ query: OnUserRenamedDocument, ...options }, handler);"
            in code
        )

    def test_subscription_options_default_even_with_required_variables(self, renderer):
        op = make_operation(OperationType.SUBSCRIPTION, "OnMessage", [REQUIRED_ID])
        code = renderer.render_hook(op, refs_for(op))
        assert "'query'> = {}" in code

    def test_idempotent(self, renderer, get_user):
        first = renderer.render_hook(get_user, refs_for(get_user))
        second = renderer.render_hook(get_user, refs_for(get_user))
        assert first == second


# =============================================================================
# Tests: Loaders
# =============================================================================


class TestRenderLoaders:
    """Tests for render_loaders."""

    def test_query_loader_pair(self, renderer, get_user):
        code = renderer.render_loaders(get_user, refs_for(get_user))
        assert "export function useGetUserQueryLoaderData() {" in code
        assert "ReturnType<ReturnType<typeof GetUserQueryLoader>>" in code
        assert "export function GetUserQueryLoader(options: " in code
        assert "async function loader(args: ReactRouter.LoaderFunctionArgs)" in code
        assert "await parseLoader(args)" in code
        assert "fetchOptions: { signal: args.request.signal, ...ctx.fetchOptions }" in code
        assert (
            "client.query<GetUserQuery, GetUserQueryVariables>(GetUserDocument, variables, "
            in code
        )

    def test_query_loader_never_emits_action(self, renderer, get_user):
        code = renderer.render_loaders(get_user, refs_for(get_user))
        assert "Action" not in code
        assert "parseAction" not in code

    def test_loader_options_accept_value_or_async_factory(self, renderer, get_user):
        code = renderer.render_loaders(get_user, refs_for(get_user))
        context = "(Partial<Urql.OperationContext> & { variables?: GetUserQueryVariables })"
        assert (
            f"options: {context} | ((args: ReactRouter.LoaderFunctionArgs) => "
            f"{context} | PromiseLike<{context}>)" in code
        )
        assert "await (typeof options === 'function' ? options(args) : options)" in code

    def test_loader_lenient_with_default(self, renderer, list_users):
        code = renderer.render_loaders(list_users, refs_for(list_users))
        assert "export function ListUsersQueryLoader(options?: " in code

    def test_mutation_action_pair(self, renderer, rename_user):
        code = renderer.render_loaders(rename_user, refs_for(rename_user))
        assert "export function useRenameUserMutationActionData() {" in code
        assert (
            "ReactRouter.useActionData() as undefined | null | "
            "Awaited<ReturnType<ReturnType<typeof RenameUserMutationAction>>>" in code
        )
        assert "export function RenameUserMutationAction(options: " in code
        assert "async function action(args: ReactRouter.ActionFunctionArgs)" in code
        assert "await parseAction(args)" in code
        assert (
            "client.mutation<RenameUserMutation, RenameUserMutationVariables>"
            "(RenameUserDocument, variables, ctx).toPromise();" in code
        )

    def test_mutation_never_emits_loader(self, renderer, rename_user):
        code = renderer.render_loaders(rename_user, refs_for(rename_user))
        assert "Loader" not in code
        assert "loader" not in code
        assert "signal" not in code

    def test_mutation_action_optional_with_default(self, renderer):
        op = make_operation(OperationType.MUTATION, "Bump", [DEFAULTED_LIMIT])
        code = renderer.render_loaders(op, refs_for(op))
        assert "export function BumpMutationAction(options?: " in code

    def test_variables_picked_explicitly(self, renderer, get_user):
        code = renderer.render_loaders(get_user, refs_for(get_user))
        assert "ctx.variables !== undefined ? ctx.variables : await parseLoader(args)" in code
        assert "'variables' in ctx" not in code

    def test_subscription_renders_nothing(self, renderer, on_user_renamed):
        assert renderer.render_loaders(on_user_renamed, refs_for(on_user_renamed)) == ""


# =============================================================================
# Tests: Template overrides
# =============================================================================


class TestTemplateDir:
    """Tests for custom template directories."""

    def test_custom_template_overrides_builtin(self, tmp_path, get_user):
        (tmp_path / "hook_query.ts.j2").write_text(
            "export const use{{ operation_name }} = () => null;\n"
        )
        renderer = ArtifactRenderer(DefaultNamingConvention(), template_dir=str(tmp_path))
        assert renderer.render_hook(get_user, refs_for(get_user)) == (
            "export const useGetUserQuery = () => null;"
        )

    def test_missing_templates_fall_back_to_package(self, tmp_path, rename_user):
        renderer = ArtifactRenderer(DefaultNamingConvention(), template_dir=str(tmp_path))
        code = renderer.render_hook(rename_user, refs_for(rename_user))
        assert code.startswith("export function useRenameUserMutation() {")

    def test_nonexistent_template_dir_is_ignored(self, tmp_path, get_user):
        renderer = ArtifactRenderer(
            DefaultNamingConvention(), template_dir=str(tmp_path / "missing")
        )
        assert "useGetUserQuery" in renderer.render_hook(get_user, refs_for(get_user))

"""gql-urqlgen: urql components, hooks and loaders from GraphQL operations."""

#!/usr/bin/env python3
"""Demonstration of urql binding generation.

This script shows how to:
1. Parse GraphQL operations
2. Configure which artifacts to generate
3. Print the generated TypeScript module

Note: This demo doesn't write any files - it prints the generated module.
"""

from gql_urqlgen.core import CodeGenerator, DocumentParser, UrqlPluginConfig

DOCUMENT = """
fragment UserFields on User {
  id
  name
}

query GetUser($id: ID!) {
  user(id: $id) {
    ...UserFields
  }
}

mutation RenameUser($id: ID!, $name: String! = "anonymous") {
  renameUser(id: $id, name: $name) {
    ...UserFields
  }
}

subscription OnUserRenamed {
  userRenamed {
    ...UserFields
  }
}
"""


def main():
    print("=== urql Bindings Demo ===\n")

    config = UrqlPluginConfig.model_validate({
        "withComponent": True,
        "withHooks": True,
        "withLoaders": "~/lib/urql#serverClient",
    })

    print("1. Parsing operations...")
    parser = DocumentParser("<inline>", config)
    operations = parser.parse_source(DOCUMENT, "demo.graphql")
    for op in operations:
        required = [v.name for v in op.variables if not v.is_optional]
        print(f"   {op.operation_type.value} {op.name} (non-null variables: {required or 'none'})")

    print("\n2. Generating module...\n")
    generator = CodeGenerator(operations, config)
    print(generator.generate_code())


if __name__ == "__main__":
    main()

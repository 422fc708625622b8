"""Shared fixtures: a small user schema and its operations."""

import pytest
from graphql import build_schema, parse

from gql_hookgen.core.ir import OperationDescriptor, OperationKind
from gql_hookgen.core.plugin import DocumentFile

SCHEMA_SDL = """
type User {
  id: ID!
  name: String!
  email: String
}

type Query {
  user(id: ID!): User
  users(first: Int): [User!]!
}

type Mutation {
  createUser(name: String!): User!
}

type Subscription {
  userCreated: User!
}
"""

OPERATIONS = """
query GetUser($id: ID!) {
  user(id: $id) {
    ...UserFields
  }
}

query ListUsers($first: Int = 10) {
  users(first: $first) {
    id
  }
}

mutation CreateUser($name: String!) {
  createUser(name: $name) {
    ...UserFields
  }
}

subscription OnUserCreated {
  userCreated {
    id
  }
}

fragment UserFields on User {
  id
  name
}
"""


@pytest.fixture
def schema():
    return build_schema(SCHEMA_SDL)


@pytest.fixture
def documents():
    return [DocumentFile(document=parse(OPERATIONS), location="operations.graphql")]


@pytest.fixture
def query_op():
    """A query with one required variable."""
    return OperationDescriptor(
        name="GetUser",
        kind=OperationKind.QUERY,
        document_variable="GetUserDocument",
        binding_name="GetUserQuery",
        result_type="GetUserQuery",
        variables_type="GetUserQueryVariables",
        has_required_variables=True,
    )


@pytest.fixture
def optional_query_op():
    """A query whose variables are all optional."""
    return OperationDescriptor(
        name="ListUsers",
        kind=OperationKind.QUERY,
        document_variable="ListUsersDocument",
        binding_name="ListUsersQuery",
        result_type="ListUsersQuery",
        variables_type="ListUsersQueryVariables",
        has_required_variables=False,
    )


@pytest.fixture
def mutation_op():
    return OperationDescriptor(
        name="CreateUser",
        kind=OperationKind.MUTATION,
        document_variable="CreateUserDocument",
        binding_name="CreateUserMutation",
        result_type="CreateUserMutation",
        variables_type="CreateUserMutationVariables",
        has_required_variables=True,
    )


@pytest.fixture
def schema_sdl():
    return SCHEMA_SDL


@pytest.fixture
def operations_source():
    return OPERATIONS

"""Shared fixtures."""

import pytest
from graphql import parse

from gql_tsgen.core import scalars
from gql_tsgen.core.scalars import ScalarTypeMap


@pytest.fixture
def fresh_scalar_map(monkeypatch):
    """Replace the process-wide scalar map for the duration of a test."""
    type_map = ScalarTypeMap()
    monkeypatch.setattr(scalars, "default_scalar_map", type_map)
    return type_map


@pytest.fixture
def sample_document():
    """A schema touching every definition kind."""
    return parse(
        """
        scalar Date

        "A registered user"
        type User implements Node {
          id: ID!
          name: String
          age: Int
          tags: [String!]!
          role: Role
        }

        input CreateUserInput {
          name: String!
          role: Role
        }

        enum Role {
          ADMIN
          USER
        }

        interface Node {
          id: ID!
        }

        union SearchResult = User | Post

        type Post {
          title: String
        }

        type Query {
          getUser(id: ID!): User
          search(term: String, limit: Int): [SearchResult]
        }

        type Mutation {
          createUser(input: CreateUserInput!): User
        }

        directive @auth on FIELD_DEFINITION

        schema {
          query: Query
          mutation: Mutation
        }

        extend type Post {
          body: String
        }
        """
    )

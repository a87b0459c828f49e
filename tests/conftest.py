"""Shared SDL and operation fixtures for the generator tests."""

from __future__ import annotations

import pytest

from action_codegen.loader import parse_document


# ---------------------------------------------------------------------------
# Actions SDL
# ---------------------------------------------------------------------------

ACTIONS_SDL = """
type Mutation {
  addUser(name: String, age: Int): AddUserOutput
  deleteUser(id: ID!): DeleteUserOutput!
  ping: PingOutput
}

type AddUserOutput {
  id: String
  success: Boolean
}

type DeleteUserOutput {
  affected: Int
}

type PingOutput

input UserFilter {
  name: String
}
"""

INSERT_USER_OPERATION = """mutation($name: String, $age: Int) {
  insert_users_one(object: {name: $name, age: $age}) { id }
}"""


@pytest.fixture
def actions_sdl() -> str:
    return ACTIONS_SDL


@pytest.fixture
def actions_ast():
    return parse_document(ACTIONS_SDL, "actions SDL")


@pytest.fixture
def insert_user_operation() -> str:
    return INSERT_USER_OPERATION


@pytest.fixture
def derive(insert_user_operation) -> dict:
    return {"operation": insert_user_operation}

"""Names derived from an action name.

Every generated identifier is a one-to-one function of the action name,
so handlers for several actions (GraphQL names are case-sensitive) can
share a module without collisions.

Examples:
  addUser  -> HASURA_addUser       (query constant)
  addUser  -> executeAddUser       (upstream call)
  AddUser  -> execute_AddUser
  _addUser -> execute__addUser
  addUser  -> addUser.js           (handler file)
"""

from __future__ import annotations

QUERY_PREFIX = "HASURA_"
EXECUTE_PREFIX = "execute"
HANDLER_SUFFIX = ".js"


def query_constant_name(action_name: str) -> str:
    return QUERY_PREFIX + action_name


def execute_function_name(action_name: str) -> str:
    """execute + the action name with its first letter upper-cased.

    Names that don't start with a lowercase letter get an underscore
    separator instead, so `addUser` and `AddUser` stay distinct.
    """
    first = action_name[:1]
    if first.islower():
        return EXECUTE_PREFIX + first.upper() + action_name[1:]
    return EXECUTE_PREFIX + "_" + action_name


def handler_file_name(action_name: str) -> str:
    return action_name + HANDLER_SUFFIX

"""Resolver package for GraphQL schema.

Resolvers pull their collaborators from the GraphQL context: ``dice`` is the
application's ``DiceRoller`` and ``store`` is its ``MessageStore``.
"""

# Intentionally empty; functions are defined in sibling modules.

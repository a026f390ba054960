"""Search term parsing.

The search layer turns a raw `(column, argument)` query parameter such as `("age", ">=18;21")` into
a strict `QueryTerm`, which a downstream query builder then converts into a predicate.
"""

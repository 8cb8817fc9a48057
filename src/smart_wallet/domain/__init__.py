"""Domain layer for SMART WALLET.

Contains business rules: the User aggregate, the entities it owns, value
objects, and domain errors. This package is deliberately technology-agnostic.

Dependency rule: do not import from `smart_wallet.adapters` or
`smart_wallet.entrypoints`.
"""

"""Service layer for SMART WALLET.

Implements application use-cases on top of the User aggregate: registration,
role and status switching, profile editing, and authentication lookups, along
with the transfer objects used at the boundary.

Dependency rule: may import `smart_wallet.domain` and
`smart_wallet.interfaces`, but not `smart_wallet.adapters` or
`smart_wallet.entrypoints`.
"""

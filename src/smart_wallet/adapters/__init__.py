"""Adapters (infrastructure) for SMART WALLET.

Provide concrete implementations of the interfaces (in-memory and SQLAlchemy
repositories, unit of work, password hashing, provisioning, notification
preferences), plus persistence mapping and related wiring (engines, metadata,
migrations).

Dependency rule: may import `smart_wallet.domain` and
`smart_wallet.interfaces`; the domain must not import this package.
"""

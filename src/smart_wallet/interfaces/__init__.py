"""Interfaces (application boundary) for SMART WALLET.

Defines framework-free application contracts: ABCs for the collaborators the
user service depends on (repository, unit of work, password hashing,
provisioning, notification preferences, ID generators). Business rules stay out
of this package.

Dependency rule: this package may import `smart_wallet.domain` types only. It
may be imported by `smart_wallet.service_layer`, `smart_wallet.adapters`, and
`smart_wallet.bootstrap`.
"""

"""Entrypoints (inbound adapters) for SMART WALLET.

Expose the application to the outside world through the command-line
interface. Parse and validate inputs, call the user service, and present
results.

Dependency rule: may import `smart_wallet.service_layer` and
`smart_wallet.bootstrap`; avoid importing `smart_wallet.adapters` directly.
"""

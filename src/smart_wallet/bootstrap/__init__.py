"""Bootstrap (composition root) for SMART WALLET.

Assembles the application at runtime: wires concrete adapters (unit of work,
password hasher, provisioners, notification preferences, ID generator) into the
`UserService`, and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/interfaces/domain).
- This package may import: `smart_wallet.adapters`, `smart_wallet.service_layer`,
  `smart_wallet.interfaces`, `smart_wallet.domain`, and `smart_wallet.config`.
- Inner layers must not import `smart_wallet.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, build_user_service

__all__ = ["AppContainer", "bootstrap", "build_user_service"]

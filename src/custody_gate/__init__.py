"""custody-gate - validation and authorization gate for custody ledger intents.

Contains:
- custody_gate.core        : primitives and intent models
- custody_gate.gatekeeper  : policy validators and signer derivation
"""

__version__ = "0.1.0"

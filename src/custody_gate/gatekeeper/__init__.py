"""Gatekeeper - допуск намерений к конвейеру упорядочивания.

- Стабильная таксономия кодов отказа (FailureCode)
- Один валидатор на вид намерения, фиксированный порядок правил
- Signer derivation для допущенных намерений
"""

from .config import PolicyConfig
from .dispatch import AdmissionDecision, IntentGatekeeper, required_signers, validate_intent
from .results import FailureCode, ValidationResult

__all__ = [
    "PolicyConfig",
    "FailureCode",
    "ValidationResult",
    "AdmissionDecision",
    "IntentGatekeeper",
    "validate_intent",
    "required_signers",
]

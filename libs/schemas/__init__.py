from libs.schemas.form_state import FormErrors, FormState, SubmissionPhase
from libs.schemas.verification_code import StoredCode

__all__ = [
    "FormErrors",
    "FormState",
    "SubmissionPhase",
    "StoredCode",
]

"""Form session exports."""

from .form_controller import FormController, FormSessionError
from .form_store import FormStore, InMemoryFormStore
from .jsonschema_validation import JsonSchemaValidator
from .session_models import (
    FormMode,
    FormSettings,
    FormState,
    IssueValidator,
    SubmitOutcome,
)

__all__ = [
    "FormController",
    "FormMode",
    "FormSessionError",
    "FormSettings",
    "FormState",
    "FormStore",
    "InMemoryFormStore",
    "IssueValidator",
    "JsonSchemaValidator",
    "SubmitOutcome",
]

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Union


logger = logging.getLogger(__name__)


ValuesRecord = Dict[str, Any]
ErrorsRecord = Dict[str, str]
Validator = Callable[[Mapping[str, Any]], Mapping[str, str]]


class FormError(Exception):
    """Base class for form engine errors."""


class FormContractError(FormError):
    """
    Programmer error: unknown field path, or a validator that broke its contract.
    Never a user-facing validation failure.
    """


class LifecycleState(str, Enum):
    IDLE = "Idle"
    VALIDATING = "Validating"
    SUBMITTED = "Submitted"


@dataclass(frozen=True)
class FieldPath:
    """
    Address of a value in the record.
    - FieldPath("email")                      -> top-level field
    - FieldPath("additionalSkills", "CSS")    -> entry inside a nested record
    """
    name: str
    key: Optional[str] = None

    @classmethod
    def parse(cls, path: Union[str, "FieldPath"]) -> "FieldPath":
        if isinstance(path, FieldPath):
            return path
        name, sep, key = str(path).partition(".")
        if sep and (not name or not key or "." in key):
            raise FormContractError(f"Invalid field path: {path!r}")
        return cls(name, key if sep else None)

    def __str__(self) -> str:
        return self.name if self.key is None else f"{self.name}.{self.key}"


@dataclass(frozen=True)
class FieldChange:
    """UI input event: a widget edit or checkbox toggle."""
    name: str
    value: Any
    is_checkbox: bool = False


@dataclass(frozen=True)
class FormSnapshot:
    """
    Read-only view handed to the presentation layer.
    All records are copies; mutating them never touches the store.
    """
    values: ValuesRecord
    errors: ErrorsRecord
    lifecycle_state: LifecycleState
    submitted_values: Optional[ValuesRecord] = None

    @property
    def is_submitted(self) -> bool:
        return self.lifecycle_state is LifecycleState.SUBMITTED


class FormStore:
    """
    State container for one form session.

    Owns the values record, the errors record and the submission lifecycle.
    Knows nothing about the domain: validation is delegated to the supplied
    validator, which is called exactly once per submit attempt.

    Lifecycle:
      Idle --submit--> Validating --(no errors)--> Submitted
                                  --(errors)-----> Idle
      any  --reset---> Idle
    """

    def __init__(self, initial_values: Mapping[str, Any], validate: Validator) -> None:
        if not callable(validate):
            raise FormContractError("validate must be callable")

        self._initial: ValuesRecord = copy.deepcopy(dict(initial_values))
        self._validate = validate

        self._values: ValuesRecord = copy.deepcopy(self._initial)
        self._errors: ErrorsRecord = {}
        self._state = LifecycleState.IDLE
        self._submitted_values: Optional[ValuesRecord] = None

        self._listeners: List[Callable[[FormSnapshot], None]] = []

    # ----------------------------
    # Read
    # ----------------------------
    @property
    def lifecycle_state(self) -> LifecycleState:
        return self._state

    def get_snapshot(self) -> FormSnapshot:
        return FormSnapshot(
            values=copy.deepcopy(self._values),
            errors=dict(self._errors),
            lifecycle_state=self._state,
            submitted_values=copy.deepcopy(self._submitted_values),
        )

    def subscribe(self, listener: Callable[[FormSnapshot], None]) -> Callable[[], None]:
        """
        Register a callback receiving the new snapshot after every change.
        Returns a function that removes the callback.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ----------------------------
    # Mutations
    # ----------------------------
    def set_field(self, path: Union[str, FieldPath], value: Any) -> None:
        """
        Replace one value. Nested paths merge into the nested record and
        keep every sibling entry. Does not validate and does not clear errors.
        """
        fp = FieldPath.parse(path)
        if fp.name not in self._values:
            raise FormContractError(f"Unknown field: {fp.name!r}")

        if fp.key is None:
            self._values[fp.name] = copy.deepcopy(value)
        else:
            nested = self._values[fp.name]
            if not isinstance(nested, dict):
                raise FormContractError(f"Field {fp.name!r} is not a nested record")
            if fp.key not in nested:
                raise FormContractError(f"Unknown entry {fp.key!r} in field {fp.name!r}")
            self._values[fp.name] = {**nested, fp.key: copy.deepcopy(value)}

        logger.debug("field %s set", fp)
        self._notify()

    def handle_change(self, change: FieldChange) -> None:
        value = bool(change.value) if change.is_checkbox else change.value
        self.set_field(change.name, value)

    def submit(self) -> LifecycleState:
        """
        Validate the current values once and move the lifecycle.
        Re-entry while a validation is running is a no-op.
        """
        if self._state is LifecycleState.VALIDATING:
            logger.debug("submit ignored: validation already running")
            return self._state

        values = copy.deepcopy(self._values)
        self._state = LifecycleState.VALIDATING
        try:
            errors = self._checked_errors(self._validate(copy.deepcopy(values)))
        except Exception:
            self._state = LifecycleState.IDLE
            self._submitted_values = None
            logger.error("validator failed; submission aborted", exc_info=True)
            self._notify()
            raise

        self._errors = errors
        if errors:
            self._state = LifecycleState.IDLE
            self._submitted_values = None
            logger.debug("submit rejected: %d field error(s) %s", len(errors), sorted(errors))
        else:
            self._state = LifecycleState.SUBMITTED
            self._submitted_values = values
            logger.info("form submitted")

        self._notify()
        return self._state

    def reset(self) -> None:
        self._values = copy.deepcopy(self._initial)
        self._errors = {}
        self._state = LifecycleState.IDLE
        self._submitted_values = None
        logger.debug("form reset")
        self._notify()

    # ----------------------------
    # Helpers
    # ----------------------------
    def _checked_errors(self, result: Any) -> ErrorsRecord:
        if not isinstance(result, Mapping):
            raise FormContractError(
                f"validate must return a mapping, got {type(result).__name__}"
            )

        errors: ErrorsRecord = {}
        for name, message in result.items():
            if name not in self._values:
                raise FormContractError(f"validate returned an error for unknown field {name!r}")
            if not isinstance(message, str):
                raise FormContractError(f"error message for {name!r} must be a string")
            errors[name] = message
        return errors

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.get_snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

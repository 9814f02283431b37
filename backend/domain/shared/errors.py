"""Domain exceptions.

Every business failure has its own exception class with a stable
``code`` and a default message. Callers catch by kind (the intermediate
base classes) or by the concrete class.

Hierarchy:
    DomainError
    ├─ FieldValidationError        one subclass per value object rule
    ├─ AggregateValidationError    rules spanning a whole aggregate
    ├─ DomainValidationError       raised by aggregate constructors,
    │                              carries every collected error
    ├─ AuthenticationError
    ├─ NotFoundError
    ├─ ConflictError
    └─ ImageAnalysisError
"""

from __future__ import annotations

from typing import List, Optional, Sequence


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """Base exception for all domain errors."""

    code: str = "domain_error"
    default_message: str = "domain error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class FieldValidationError(DomainError):
    """A single value object rule was violated."""

    code = "validation_error"
    default_message = "invalid value"


class AggregateValidationError(DomainError):
    """An aggregate-level rule was violated."""

    code = "aggregate_validation_error"
    default_message = "invalid aggregate"


class AuthenticationError(DomainError):
    """Authentication or session failure."""

    code = "authentication_error"
    default_message = "authentication failed"


class NotFoundError(DomainError):
    """Requested aggregate does not exist."""

    code = "not_found"
    default_message = "not found"


class ConflictError(DomainError):
    """Operation conflicts with existing state."""

    code = "conflict"
    default_message = "conflict"


class ImageAnalysisError(DomainError):
    """A meal photo could not be turned into food items."""

    code = "image_analysis_error"
    default_message = "image analysis error"


class DomainValidationError(DomainError):
    """Aggregate construction failed on one or more rules.

    Attributes:
        errors: Every collected error, in field order.

    Example:
        >>> try:
        ...     User.create(email="", password="short", ...)
        ... except DomainValidationError as exc:
        ...     exc.messages
        ['email is required', 'password must be at least 8 characters']
    """

    code = "validation_failed"
    default_message = "validation failed"

    def __init__(self, errors: Sequence[DomainError]) -> None:
        self.errors: List[DomainError] = list(errors)
        super().__init__("; ".join(e.message for e in self.errors) or None)

    @property
    def messages(self) -> List[str]:
        """Messages of every collected error."""
        return [e.message for e in self.errors]


# ═══════════════════════════════════════════════════════════
# USER FIELD ERRORS
# ═══════════════════════════════════════════════════════════


class EmailRequiredError(FieldValidationError):
    code = "email_required"
    default_message = "email is required"


class InvalidEmailFormatError(FieldValidationError):
    code = "invalid_email_format"
    default_message = "invalid email format"


class EmailTooLongError(FieldValidationError):
    code = "email_too_long"
    default_message = "email must be 254 characters or less"


class PasswordRequiredError(FieldValidationError):
    code = "password_required"
    default_message = "password is required"


class PasswordTooShortError(FieldValidationError):
    code = "password_too_short"
    default_message = "password must be at least 8 characters"


class PasswordTooLongError(FieldValidationError):
    code = "password_too_long"
    default_message = "password must be 72 bytes or less"


class NicknameRequiredError(FieldValidationError):
    code = "nickname_required"
    default_message = "nickname is required"


class NicknameTooLongError(FieldValidationError):
    code = "nickname_too_long"
    default_message = "nickname must be 50 characters or less"


class WeightMustBePositiveError(FieldValidationError):
    code = "weight_must_be_positive"
    default_message = "weight must be positive"


class WeightTooHeavyError(FieldValidationError):
    code = "weight_too_heavy"
    default_message = "weight must be 500kg or less"


class HeightMustBePositiveError(FieldValidationError):
    code = "height_must_be_positive"
    default_message = "height must be positive"


class HeightTooTallError(FieldValidationError):
    code = "height_too_tall"
    default_message = "height must be 300cm or less"


class BirthDateMustBePastError(FieldValidationError):
    code = "birth_date_must_be_past"
    default_message = "birth date must be in the past"


class BirthDateTooOldError(FieldValidationError):
    code = "birth_date_too_old"
    default_message = "birth date must be within 150 years"


class InvalidGenderError(FieldValidationError):
    code = "invalid_gender"
    default_message = "gender must be male, female, or other"


class InvalidActivityLevelError(FieldValidationError):
    code = "invalid_activity_level"
    default_message = (
        "activity level must be sedentary, light, moderate, active, or veryActive"
    )


# ═══════════════════════════════════════════════════════════
# RECORD FIELD ERRORS
# ═══════════════════════════════════════════════════════════


class EatenAtMustNotBeFutureError(FieldValidationError):
    code = "eaten_at_must_not_be_future"
    default_message = "eaten at must not be in the future"


class CaloriesMustBePositiveError(FieldValidationError):
    code = "calories_must_be_positive"
    default_message = "calories must be positive"


class ItemNameRequiredError(FieldValidationError):
    code = "item_name_required"
    default_message = "item name is required"


class PfcMustNotBeNegativeError(FieldValidationError):
    code = "pfc_must_not_be_negative"
    default_message = "protein, fat and carbs must not be negative"


class InvalidStatisticsPeriodError(FieldValidationError):
    code = "invalid_statistics_period"
    default_message = "statistics period must be week or month"


class RecordItemsRequiredError(AggregateValidationError):
    code = "record_items_required"
    default_message = "at least one record item is required"


# ═══════════════════════════════════════════════════════════
# IDENTIFIER ERRORS
# ═══════════════════════════════════════════════════════════


class InvalidUuidFormatError(FieldValidationError):
    code = "invalid_uuid_format"
    default_message = "invalid uuid format"


class InvalidUserIdError(FieldValidationError):
    code = "invalid_user_id"
    default_message = "invalid user id"


class InvalidRecordIdError(FieldValidationError):
    code = "invalid_record_id"
    default_message = "invalid record id"


class InvalidRecordItemIdError(FieldValidationError):
    code = "invalid_record_item_id"
    default_message = "invalid record item id"


class InvalidRecordPfcIdError(FieldValidationError):
    code = "invalid_record_pfc_id"
    default_message = "invalid record pfc id"


class InvalidAdviceCacheIdError(FieldValidationError):
    code = "invalid_advice_cache_id"
    default_message = "invalid advice cache id"


# ═══════════════════════════════════════════════════════════
# AUTHENTICATION / SESSION ERRORS
# ═══════════════════════════════════════════════════════════


class InvalidCredentialsError(AuthenticationError):
    code = "invalid_credentials"
    default_message = "invalid email or password"


class SessionNotFoundError(AuthenticationError):
    code = "session_not_found"
    default_message = "session not found"


class SessionExpiredError(AuthenticationError):
    code = "session_expired"
    default_message = "session has expired"


class InvalidSessionIdError(AuthenticationError):
    code = "invalid_session_id"
    default_message = "invalid session id"


class SessionIdGenerationFailedError(AuthenticationError):
    code = "session_id_generation_failed"
    default_message = "failed to generate session id"


# ═══════════════════════════════════════════════════════════
# LOOKUP / CONFLICT ERRORS
# ═══════════════════════════════════════════════════════════


class UserNotFoundError(NotFoundError):
    code = "user_not_found"
    default_message = "user not found"


class EmailAlreadyExistsError(ConflictError):
    code = "email_already_exists"
    default_message = "email already exists"


# ═══════════════════════════════════════════════════════════
# IMAGE ANALYSIS ERRORS
# ═══════════════════════════════════════════════════════════


class ImageDataRequiredError(FieldValidationError):
    code = "image_data_required"
    default_message = "image data is required"


class MimeTypeRequiredError(FieldValidationError):
    code = "mime_type_required"
    default_message = "mime type is required"


class NoFoodDetectedError(ImageAnalysisError):
    code = "no_food_detected"
    default_message = "no food detected in the image"


class ImageAnalysisFailedError(ImageAnalysisError):
    code = "image_analysis_failed"
    default_message = "image analysis failed"

"""Domain errors raised while assigning entity codes."""


class CodeGenerationError(Exception):
    """Base class for code generation failures."""


class RegistryUnavailableError(CodeGenerationError):
    """Raised when the existing-code lookup cannot be performed."""

    def __init__(self, entity: str, prefix: str):
        self.entity = entity
        self.prefix = prefix
        super().__init__(f"Could not read existing {entity} codes for prefix '{prefix}'")


class CodeConflictError(CodeGenerationError):
    """Raised when an insert violates the unique constraint on the code column."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Code '{code}' is already assigned")


class CodeGenerationExhaustedError(CodeGenerationError):
    """Raised when every retry attempt collided with a concurrent insert."""

    def __init__(self, entity: str, prefix: str, attempts: int):
        self.entity = entity
        self.prefix = prefix
        self.attempts = attempts
        super().__init__(
            f"Could not generate a unique {entity} code for prefix '{prefix}' "
            f"after {attempts} attempts"
        )


class DuplicateCodeError(CodeGenerationError):
    """Raised when a caller-supplied code already belongs to another entity."""

    def __init__(self, entity: str, code: str):
        self.entity = entity
        self.code = code
        super().__init__(f"{entity.capitalize()} with code '{code}' already exists")


class CodeTooLongError(CodeGenerationError):
    """Raised when an assembled code would not fit the entity's code column."""

    def __init__(self, entity: str, code: str, limit: int):
        self.entity = entity
        self.code = code
        self.limit = limit
        super().__init__(f"Generated {entity} code '{code}' exceeds {limit} characters")


class DuplicateRegistrationError(Exception):
    """Raised when a vehicle registration number is already on file."""

    def __init__(self, registration_number: str):
        self.registration_number = registration_number
        super().__init__(f"Vehicle with registration '{registration_number}' already exists")

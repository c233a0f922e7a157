class DceClassifierError(Exception):
    """Base exception for classifier errors."""
    code = "CLASSIFIER_ERROR"


class InvalidInputError(DceClassifierError):
    """Raised when a caller passes content or file size of the wrong type."""
    code = "INVALID_INPUT"


class ClassificationError(DceClassifierError):
    """Raised when classification of a single document fails unexpectedly."""
    code = "CLASSIFICATION_FAILED"

"""Challenge domain errors."""
from django.core.exceptions import ValidationError


class ChallengeStateError(ValidationError):
    """Raised on a status change that is not allowed from the current status."""

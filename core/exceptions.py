"""
Domain exceptions for the job board.

Every error that can reach a client carries an HTTP status code and a stable
machine-readable code; the error handlers in core.middleware.error_handling
turn them into ``{"error": ..., "code": ...}`` responses.
"""

from fastapi import status


class JobBoardError(Exception):
    """Base class for all job board errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "JOB_BOARD_ERROR"
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ==================== Intake ===================== #
class IntakeError(JobBoardError):
    """Failure while turning a submission into candidate/application records."""

    code = "INTAKE_ERROR"


class IntakeValidationFailed(IntakeError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_FAILED"
    default_message = "Missing required fields"


class JobNotEligible(IntakeError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "JOB_NOT_ELIGIBLE"
    default_message = "This job is not open for applications"


class StoreFailure(IntakeError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "STORE_FAILURE"
    default_message = "Failed to submit application"


class DuplicateApplication(IntakeError):
    status_code = status.HTTP_409_CONFLICT
    code = "DUPLICATE_APPLICATION"
    default_message = "You have already applied to this job"


class CandidateConflict(Exception):
    """
    Raised by a candidate store when (email, recruiter_id) already exists.

    This is an expected branch of the intake workflow, not an error for the
    caller, so it deliberately does not derive from JobBoardError.
    """

    def __init__(self, email: str, recruiter_id):
        self.email = email
        self.recruiter_id = recruiter_id
        super().__init__(f"Candidate already exists for recruiter {recruiter_id}")


# ==================== Extraction ===================== #
class ExtractionError(JobBoardError):
    code = "EXTRACTION_ERROR"
    default_message = "Failed to parse resume"


class UnsupportedFormat(ExtractionError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "UNSUPPORTED_FORMAT"
    default_message = "Only PDF files are supported"


class MissingResumeFile(ExtractionError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "MISSING_FILE"
    default_message = "No file provided"


class ResumeTooLarge(ExtractionError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    code = "FILE_TOO_LARGE"
    default_message = "Resume file is too large"


class MalformedResponse(ExtractionError):
    code = "MALFORMED_RESPONSE"
    default_message = "Failed to parse resume data"


class ExtractionServiceFailure(ExtractionError):
    code = "EXTRACTION_SERVICE_FAILURE"
    default_message = "Resume extraction service failed"


# ==================== Rendering ===================== #
class RenderingError(JobBoardError):
    code = "RENDERING_ERROR"
    default_message = "Failed to save resume"


class MissingResumeFields(RenderingError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "MISSING_FIELDS"
    default_message = "Missing required fields"


class RenderingServiceFailure(RenderingError):
    code = "RENDERING_SERVICE_FAILURE"
    default_message = "Resume formatting service failed"


class ResumeUploadFailed(RenderingError):
    code = "UPLOAD_FAILED"
    default_message = "Failed to upload file"


class ResumeMetadataFailed(RenderingError):
    code = "METADATA_FAILED"
    default_message = "Failed to save file record"


# ==================== Notification ===================== #
class NotificationError(JobBoardError):
    code = "NOTIFICATION_ERROR"
    default_message = "Failed to send email"


class MissingLeadFields(NotificationError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "MISSING_FIELDS"
    default_message = "Missing required fields"


class DeliveryFailed(NotificationError):
    code = "DELIVERY_FAILED"
    default_message = "Failed to send email"

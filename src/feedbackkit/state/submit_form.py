"""State for the feedback submission form."""

import logging

from feedbackkit.errors import FeedbackKitError
from feedbackkit.models.feedback import CreateFeedbackRequest, Feedback, FeedbackCategory
from feedbackkit.services.feedback_service import FeedbackService

logger = logging.getLogger(__name__)

OPERATIONAL_EMAILS = "operational"
MARKETING_EMAILS = "marketing"


class SubmitFeedbackForm:
    """Form fields, validation and submission for new feedback."""

    def __init__(
        self,
        feedback: FeedbackService,
        category: FeedbackCategory = FeedbackCategory.FEATURE_REQUEST,
    ):
        self.feedback_service = feedback
        self.title = ""
        self.description = ""
        self.category = category
        self.email = ""
        self.subscribe_to_mailing_list = False
        self.operational_emails = True
        self.marketing_emails = True

        self.is_submitting = False
        self.error: FeedbackKitError | None = None

    @property
    def is_valid(self) -> bool:
        return bool(self.title.strip()) and bool(self.description.strip())

    def build_request(self) -> CreateFeedbackRequest:
        """Request from the current fields.

        Mailing-list options are only sent along with an email address, and
        email types only when the user subscribed.
        """
        email = self.email.strip() or None

        email_types = None
        if email is not None and self.subscribe_to_mailing_list:
            email_types = []
            if self.operational_emails:
                email_types.append(OPERATIONAL_EMAILS)
            if self.marketing_emails:
                email_types.append(MARKETING_EMAILS)
            email_types = email_types or None

        return CreateFeedbackRequest(
            title=self.title.strip(),
            description=self.description.strip(),
            category=self.category,
            email=email,
            subscribe_to_mailing_list=(
                self.subscribe_to_mailing_list if email is not None else None
            ),
            mailing_list_email_types=email_types,
        )

    def submit(self) -> Feedback | None:
        """Submit the form.

        Returns:
            The created feedback, or None if the form is invalid, already
            submitting, or the request failed (see ``error``)
        """
        if not self.is_valid or self.is_submitting:
            return None

        self.is_submitting = True
        self.error = None
        try:
            return self.feedback_service.create(self.build_request())
        except Exception as e:
            self.error = FeedbackKitError.from_exception(e)
            logger.warning("Failed to submit feedback: %r", self.error)
            return None
        finally:
            self.is_submitting = False

    def reset(self) -> None:
        """Clear the fields after a successful submission."""
        self.title = ""
        self.description = ""
        self.email = ""
        self.subscribe_to_mailing_list = False
        self.error = None

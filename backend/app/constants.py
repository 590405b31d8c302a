"""Shared display constants."""

# Rendered in place of any optional value that is missing
NOT_AVAILABLE = "N/A"

YES = "Yes"
NO = "No"

UPLOADED = "Uploaded"
NOT_UPLOADED = "Not Uploaded"

# en-GB day/month/year
DISPLAY_DATE_FORMAT = "%d/%m/%Y"

NO_PATIENTS_MESSAGE = "No patients assigned yet."
STORE_FAILURE_MESSAGE = "Could not load patients"

"""Application-wide limits shared by validation, session state and UI."""

MAX_CHARS = 5000
COPY_FEEDBACK_MS = 2000

# Source-only pseudo language forwarded to the model as "detect it yourself"
AUTO_DETECT = "auto"

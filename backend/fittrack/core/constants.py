"""Shared application constants.

Centralizes the labels and units used by the goal metrics and the demo
seed so we can document and adjust them in one place.
"""

# Length of one day in seconds, used for deadline countdowns
SECONDS_PER_DAY = 86400

# Goal progress is reported as a whole percentage in [0, 100]
PROGRESS_MIN = 0
PROGRESS_MAX = 100

# Default wording for deadline countdowns.
# The dashboard shows recurring goals as "Weekly goal"; callers pass their own.
ONGOING_LABEL = "Ongoing goal"
DEADLINE_PASSED_LABEL = "Deadline passed"

# Demo account created by the seed on first boot
DEMO_USERNAME = "alex"
DEMO_PASSWORD = "password"
DEMO_DISPLAY_NAME = "Alex Johnson"

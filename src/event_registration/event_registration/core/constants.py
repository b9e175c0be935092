"""Constants and defaults.

Note: Keep table names and hashing parameters here so schema.sql, the
repositories and the provisioning scripts agree on them.
"""

REGISTRATIONS_TABLE = "REGISTRATIONS"
ATTENDEE_ACCOUNTS_TABLE = "ATTENDEE_ACCOUNTS"
ADMINISTRATORS_TABLE = "ADMINISTRATORS"

PASSWORD_HASH_ALGORITHM = "sha256"
DEFAULT_SALT_LENGTH = 16

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

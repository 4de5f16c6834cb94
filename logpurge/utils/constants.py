"""Constants shared across LogPurge modules."""

# Report file used when --report is given without a filename
DEFAULT_REPORT_NAME = "log-purge-report.md"

# File extensions scanned when the pattern is a folder
DEFAULT_EXTENSIONS = ("js", "ts", "jsx", "tsx", "vue")

# Prefix inserted in comment mode
COMMENT_PREFIX = "// "

# Console summary lists modified files only below this count
MAX_LISTED_MODIFIED_FILES = 15

# Report lists clean files by name up to this count, otherwise only counts them
MAX_LISTED_CLEAN_FILES = 20

# Statement content is truncated to this many characters in reports
REPORT_CONTENT_PREVIEW = 50

CONFIRMATION_PROMPT = "About to modify files in place. This can't be undone. Proceed? (y/N) "

"""
Shared constants for PDF verification.

Field names are the keys of a validation report; they match the camelCase
names callers use in expectation sets.
"""

# Report fields
PAGE_NUM_FIELD = "pageNum"
TITLE_FIELD = "title"
TEXT_PHRASES_FIELD = "textPhrases"
GENERAL_FIELD = "general"

# Metadata key holding the declared document title (Info dictionary, without "/")
TITLE_METADATA_KEY = "Title"

# Finding messages
PAGE_NUM_MISMATCH_TEMPLATE = "expect pdf has {expected} pages, but has {actual}"
TITLE_MISMATCH_TEMPLATE = "expect pdf has title {expected}, but it hasn't."

# PDF sniffing: header must appear within the first KB
PDF_HEADER = b"%PDF"
PDF_HEADER_SEARCH_WINDOW = 1024

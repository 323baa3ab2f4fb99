"""
Version constants for the parser.

PARSER_VERSION is stamped into every MessageSummary so that stored output can be
traced back to the parser that produced it.
"""

__version__ = "1.0.0"

PARSER_VERSION = f"mailparse-{__version__}"

"""RangeLink - portable links to code ranges.

Encodes an editor selection into compact, pasteable link text such as
``src/foo.ts#L10C5-L20C10`` and decodes such text back into a structured
reference. Portable links embed their delimiter configuration
(``src/foo.ts#L10C5-L20C10~#~L~-~C~``) so they decode under any settings.

Public API:
    format_link - Encode a selection as link text
    parse_link - Decode link text (returns ParsedLink and errors)
    find_links_in_text - Locate every link in free text
    normalize_selections - Editor selections to an InputSelection
    validate_delimiters - Check a DelimiterConfig
    load_delimiter_config - DelimiterConfig from raw settings with fallback

Errors are returned, never raised, as RangeLinkError subclasses carrying a
structured Diagnostic.

Submodules:
    rangelink.model - Value objects (positions, selections, links)
    rangelink.diagnostics - Error codes, templates and formatter
    rangelink.selection - Normalization and range computation
    rangelink.syntax - Encoder, decoder, portable block and quoting
    rangelink.detection - Link detection in text
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import DelimiterConfigLoadResult, load_delimiter_config
from .detection import find_links_in_text
from .diagnostics import (
    DelimiterConfigError,
    Diagnostic,
    DiagnosticCode,
    LinkParseError,
    PortableLinkError,
    RangeLinkError,
    SelectionError,
    ValidationResult,
)
from .enums import LinkType, RangeFormat, RangeNotation, SelectionCoverage, SelectionType
from .model import (
    DEFAULT_DELIMITERS,
    DelimiterConfig,
    DetectedLink,
    EditorPosition,
    FormattedLink,
    InputSelection,
    LinkPosition,
    ParsedLink,
    RawSelection,
    Selection,
)
from .selection import normalize_selections
from .syntax import format_link, is_rangelink, parse_link
from .validation import validate_delimiters

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("rangelink")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_DELIMITERS",
    "DelimiterConfig",
    "DelimiterConfigError",
    "DelimiterConfigLoadResult",
    "DetectedLink",
    "Diagnostic",
    "DiagnosticCode",
    "EditorPosition",
    "FormattedLink",
    "InputSelection",
    "LinkParseError",
    "LinkPosition",
    "LinkType",
    "ParsedLink",
    "PortableLinkError",
    "RangeFormat",
    "RangeLinkError",
    "RangeNotation",
    "RawSelection",
    "Selection",
    "SelectionCoverage",
    "SelectionError",
    "SelectionType",
    "ValidationResult",
    "__version__",
    "find_links_in_text",
    "format_link",
    "is_rangelink",
    "load_delimiter_config",
    "normalize_selections",
    "parse_link",
    "validate_delimiters",
]

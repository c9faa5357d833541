"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    _ANCHOR_SHAPE = "Expected L<line>[C<col>][-L<line>[C<col>]] after the hash"

    # ========================================================================
    # CONFIGURATION
    # ========================================================================

    @staticmethod
    def _field_details(field: str | None, value: str) -> tuple[tuple[str, str], ...]:
        if field is None:
            return (("value", value),)
        return (("field", field), ("value", value))

    @staticmethod
    def _field_label(field: str | None) -> str:
        return "Delimiter" if field is None else f"Delimiter '{field}'"

    @staticmethod
    def delimiter_empty(value: str, field: str | None = None) -> Diagnostic:
        """Delimiter is empty or whitespace-only.

        Args:
            value: The rejected delimiter value
            field: Configuration field name (line, position, hash, range)

        Returns:
            Diagnostic for CONFIG_DELIMITER_EMPTY
        """
        msg = f"{ErrorTemplate._field_label(field)} must not be empty"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_DELIMITER_EMPTY,
            message=msg,
            hint="Provide at least one visible, non-digit character",
            function_name="validate_delimiter",
            details=ErrorTemplate._field_details(field, value),
        )

    @staticmethod
    def delimiter_whitespace(value: str, field: str | None = None) -> Diagnostic:
        """Delimiter contains whitespace.

        Args:
            value: The rejected delimiter value
            field: Configuration field name

        Returns:
            Diagnostic for CONFIG_DELIMITER_WHITESPACE
        """
        msg = f"{ErrorTemplate._field_label(field)} must not contain whitespace: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_DELIMITER_WHITESPACE,
            message=msg,
            hint="Links are split on whitespace; remove spaces, tabs and newlines",
            function_name="validate_delimiter",
            details=ErrorTemplate._field_details(field, value),
        )

    @staticmethod
    def delimiter_digits(value: str, field: str | None = None) -> Diagnostic:
        """Delimiter contains digits.

        Args:
            value: The rejected delimiter value
            field: Configuration field name

        Returns:
            Diagnostic for CONFIG_DELIMITER_DIGITS
        """
        msg = f"{ErrorTemplate._field_label(field)} must not contain digits: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_DELIMITER_DIGITS,
            message=msg,
            hint="Digits are reserved for line and column numbers",
            function_name="validate_delimiter",
            details=ErrorTemplate._field_details(field, value),
        )

    @staticmethod
    def delimiter_reserved(value: str, char: str, field: str | None = None) -> Diagnostic:
        """Delimiter contains a reserved character.

        Args:
            value: The rejected delimiter value
            char: First reserved character found
            field: Configuration field name

        Returns:
            Diagnostic for CONFIG_DELIMITER_RESERVED
        """
        msg = (
            f"{ErrorTemplate._field_label(field)} contains reserved character "
            f"'{char}': '{value}'"
        )
        return Diagnostic(
            code=DiagnosticCode.CONFIG_DELIMITER_RESERVED,
            message=msg,
            hint="Reserved characters are ~ | / \\ : , @",
            function_name="validate_delimiter",
            details=(*ErrorTemplate._field_details(field, value), ("reserved", char)),
        )

    @staticmethod
    def hash_not_single_char(value: str) -> Diagnostic:
        """Hash delimiter is longer than one character.

        Args:
            value: The rejected hash value

        Returns:
            Diagnostic for CONFIG_HASH_NOT_SINGLE_CHAR
        """
        msg = f"Hash delimiter must be exactly one character, got {len(value)}: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_HASH_NOT_SINGLE_CHAR,
            message=msg,
            hint="Rectangular links write the hash twice; it must stay one character",
            function_name="validate_delimiter",
            details=(("field", "hash"), ("value", value)),
        )

    @staticmethod
    def delimiter_not_unique(field: str, value: str, other_field: str) -> Diagnostic:
        """Two delimiters are equal ignoring case.

        Args:
            field: The later field of the colliding pair
            value: Its value
            other_field: The earlier field it collides with

        Returns:
            Diagnostic for CONFIG_DELIMITER_NOT_UNIQUE
        """
        msg = (
            f"Delimiter '{field}' ('{value}') is not unique: "
            f"same as '{other_field}' ignoring case"
        )
        return Diagnostic(
            code=DiagnosticCode.CONFIG_DELIMITER_NOT_UNIQUE,
            message=msg,
            hint="Choose four delimiters that differ ignoring case",
            function_name="validate_uniqueness",
            details=(("field", field), ("value", value), ("conflicts_with", other_field)),
        )

    @staticmethod
    def delimiter_substring_conflict(
        field: str, value: str, other_field: str, other_value: str
    ) -> Diagnostic:
        """One delimiter contains another.

        Args:
            field: The containing field
            value: Its value
            other_field: The contained field
            other_value: Its value

        Returns:
            Diagnostic for CONFIG_DELIMITER_SUBSTRING_CONFLICT
        """
        msg = (
            f"Delimiter '{field}' ('{value}') contains delimiter "
            f"'{other_field}' ('{other_value}') ignoring case"
        )
        return Diagnostic(
            code=DiagnosticCode.CONFIG_DELIMITER_SUBSTRING_CONFLICT,
            message=msg,
            hint="No delimiter may appear inside another one",
            function_name="validate_substring_conflicts",
            details=(("field", field), ("value", value), ("conflicts_with", other_field)),
        )

    @staticmethod
    def config_unknown(detail: str) -> Diagnostic:
        """Unexpected validation failure (exhaustiveness guard).

        Args:
            detail: Description of the unhandled case

        Returns:
            Diagnostic for CONFIG_UNKNOWN
        """
        msg = f"Unknown delimiter validation failure: {detail}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_UNKNOWN,
            message=msg,
            function_name="validate_delimiters",
        )

    # ========================================================================
    # SELECTION
    # ========================================================================

    @staticmethod
    def selection_empty() -> Diagnostic:
        """No selection given.

        Returns:
            Diagnostic for SELECTION_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.SELECTION_EMPTY,
            message="No selection to create a link from",
            hint="Select the lines or characters to link to",
            function_name="validate_input_selection",
        )

    @staticmethod
    def selection_unknown_type(selection_type: str) -> Diagnostic:
        """Selection type outside Normal/Rectangular.

        Args:
            selection_type: The unrecognized value

        Returns:
            Diagnostic for SELECTION_UNKNOWN_TYPE
        """
        msg = f"Unknown selection type: '{selection_type}'"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_UNKNOWN_TYPE,
            message=msg,
            function_name="validate_input_selection",
            details=(("selection_type", selection_type),),
        )

    @staticmethod
    def selection_negative_coordinates(index: int, line: int, character: int) -> Diagnostic:
        """Selection has a negative line or character.

        Args:
            index: Position of the selection in the input
            line: Offending line
            character: Offending character

        Returns:
            Diagnostic for SELECTION_NEGATIVE_COORDINATES
        """
        msg = f"Selection {index} has negative coordinates ({line}, {character})"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_NEGATIVE_COORDINATES,
            message=msg,
            hint="Editor coordinates are 0-based and never negative",
            function_name="validate_input_selection",
            details=(("index", str(index)),),
        )

    @staticmethod
    def selection_backward(index: int, start: str, end: str) -> Diagnostic:
        """Selection end precedes its start.

        Args:
            index: Position of the selection in the input
            start: Start position as "line:character"
            end: End position as "line:character"

        Returns:
            Diagnostic for SELECTION_BACKWARD
        """
        msg = f"Selection {index} ends before it starts ({start} > {end})"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_BACKWARD,
            message=msg,
            hint="Normalize the selection so that start precedes end",
            function_name="validate_input_selection",
            details=(("index", str(index)), ("start", start), ("end", end)),
        )

    @staticmethod
    def selection_zero_width() -> Diagnostic:
        """Every selection is empty.

        Returns:
            Diagnostic for SELECTION_ZERO_WIDTH
        """
        return Diagnostic(
            code=DiagnosticCode.SELECTION_ZERO_WIDTH,
            message="Selection is empty (start equals end)",
            hint="Select at least one character or a whole line",
            function_name="validate_input_selection",
        )

    @staticmethod
    def selection_normal_multiple(count: int) -> Diagnostic:
        """Normal selection with more than one range.

        Args:
            count: Number of selections received

        Returns:
            Diagnostic for SELECTION_NORMAL_MULTIPLE
        """
        msg = f"Normal selection must contain exactly one range, got {count}"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_NORMAL_MULTIPLE,
            message=msg,
            hint="Only rectangular selections may contain several ranges",
            function_name="validate_input_selection",
            details=(("count", str(count)),),
        )

    @staticmethod
    def rectangular_too_few(count: int) -> Diagnostic:
        """Rectangular selection with fewer than two ranges.

        Args:
            count: Number of ranges given

        Returns:
            Diagnostic for SELECTION_RECTANGULAR_TOO_FEW
        """
        msg = f"Rectangular selection needs at least 2 ranges, got {count}"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_RECTANGULAR_TOO_FEW,
            message=msg,
            function_name="validate_input_selection",
            hint="Encode a single range as a normal selection",
            details=(("count", str(count)),),
        )

    @staticmethod
    def rectangular_multiline(index: int) -> Diagnostic:
        """Rectangular selection contains a multi-line range.

        Args:
            index: Position of the offending selection

        Returns:
            Diagnostic for SELECTION_RECTANGULAR_MULTILINE
        """
        msg = f"Rectangular selection {index} spans more than one line"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_RECTANGULAR_MULTILINE,
            message=msg,
            function_name="validate_input_selection",
            details=(("index", str(index)),),
        )

    @staticmethod
    def rectangular_mismatched_columns(index: int) -> Diagnostic:
        """Rectangular selection ranges use different columns.

        Args:
            index: Position of the first mismatching selection

        Returns:
            Diagnostic for SELECTION_RECTANGULAR_MISMATCHED_COLUMNS
        """
        msg = f"Rectangular selection {index} does not share the columns of the first range"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_RECTANGULAR_MISMATCHED_COLUMNS,
            message=msg,
            function_name="validate_input_selection",
            details=(("index", str(index)),),
        )

    @staticmethod
    def rectangular_unsorted(index: int) -> Diagnostic:
        """Rectangular selection lines are not ascending.

        Args:
            index: Position of the first out-of-order selection

        Returns:
            Diagnostic for SELECTION_RECTANGULAR_UNSORTED
        """
        msg = f"Rectangular selection {index} is not in ascending line order"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_RECTANGULAR_UNSORTED,
            message=msg,
            hint="Sort rectangular ranges by line",
            function_name="validate_input_selection",
            details=(("index", str(index)),),
        )

    @staticmethod
    def rectangular_non_contiguous(previous_line: int, line: int) -> Diagnostic:
        """Rectangular selection skips a line.

        Args:
            previous_line: Line of the preceding range (0-based)
            line: Line of the following range (0-based)

        Returns:
            Diagnostic for SELECTION_RECTANGULAR_NON_CONTIGUOUS
        """
        msg = f"Rectangular selection is not contiguous: line {line} follows line {previous_line}"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_RECTANGULAR_NON_CONTIGUOUS,
            message=msg,
            function_name="validate_input_selection",
            details=(("previous_line", str(previous_line)), ("line", str(line))),
        )

    @staticmethod
    def selection_out_of_bounds(line: int, reason: str) -> Diagnostic:
        """Line accessor failed: the document changed under the selection.

        Args:
            line: Line that could not be read (0-based)
            reason: Text of the accessor's exception

        Returns:
            Diagnostic for SELECTION_OUT_OF_BOUNDS
        """
        msg = f"Line {line} is out of bounds; the document was modified"
        return Diagnostic(
            code=DiagnosticCode.SELECTION_OUT_OF_BOUNDS,
            message=msg,
            hint="Reselect the text and try again",
            function_name="normalize_selections",
            details=(("line", str(line)), ("reason", reason)),
        )

    # ========================================================================
    # PARSING
    # ========================================================================

    @staticmethod
    def link_too_long(length: int, maximum: int) -> Diagnostic:
        """Candidate exceeds the maximum link length.

        Args:
            length: Candidate length
            maximum: Accepted maximum

        Returns:
            Diagnostic for PARSE_LINK_TOO_LONG
        """
        msg = f"Link length {length} exceeds maximum of {maximum} characters"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LINK_TOO_LONG,
            message=msg,
            hint="Shorten the path or select a smaller range",
            function_name="parse_link",
            details=(("length", str(length)), ("maximum", str(maximum))),
        )

    @staticmethod
    def delimiters_required() -> Diagnostic:
        """Regular link parsed without a delimiter configuration.

        Returns:
            Diagnostic for PARSE_DELIMITERS_REQUIRED
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_DELIMITERS_REQUIRED,
            message="Delimiters are required to parse a regular link",
            hint="Pass the active DelimiterConfig (DEFAULT_DELIMITERS for L, C, #, -)",
            function_name="parse_link",
        )

    @staticmethod
    def empty_path() -> Diagnostic:
        """Nothing before the hash.

        Returns:
            Diagnostic for PARSE_EMPTY_PATH
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_EMPTY_PATH,
            message="Link has no path before the hash",
            function_name="parse_link",
            position=0,
        )

    @staticmethod
    def url_not_supported(path: str) -> Diagnostic:
        """Path is a web URL.

        Args:
            path: The rejected path

        Returns:
            Diagnostic for PARSE_URL_NOT_SUPPORTED
        """
        msg = f"Web URLs are not file paths: '{path}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_URL_NOT_SUPPORTED,
            message=msg,
            hint="Open web links with a browser",
            function_name="parse_link",
            position=0,
            details=(("path", path),),
        )

    @staticmethod
    def malformed_range(anchor: str, position: int, reason: str) -> Diagnostic:
        """Anchor does not follow the range grammar.

        Args:
            anchor: Text after the hash
            position: Offset in the candidate where scanning stopped
            reason: Why scanning stopped

        Returns:
            Diagnostic for PARSE_MALFORMED_RANGE
        """
        msg = f"Malformed range '{anchor}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MALFORMED_RANGE,
            message=msg,
            hint=ErrorTemplate._ANCHOR_SHAPE,
            function_name="parse_link",
            position=position,
            details=(("anchor", anchor),),
        )

    @staticmethod
    def line_below_minimum(line: int) -> Diagnostic:
        """Line number smaller than 1.

        Args:
            line: Parsed line number

        Returns:
            Diagnostic for PARSE_LINE_BELOW_MINIMUM
        """
        msg = f"Line number must be at least 1, got {line}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LINE_BELOW_MINIMUM,
            message=msg,
            hint="Link coordinates are 1-based",
            function_name="parse_link",
            details=(("line", str(line)),),
        )

    @staticmethod
    def char_below_minimum(character: int) -> Diagnostic:
        """Column number smaller than 1.

        Args:
            character: Parsed column number

        Returns:
            Diagnostic for PARSE_CHAR_BELOW_MINIMUM
        """
        msg = f"Column number must be at least 1, got {character}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_CHAR_BELOW_MINIMUM,
            message=msg,
            hint="Link coordinates are 1-based",
            function_name="parse_link",
            details=(("character", str(character)),),
        )

    @staticmethod
    def line_backward(start_line: int, end_line: int) -> Diagnostic:
        """End line before start line.

        Args:
            start_line: Parsed start line
            end_line: Parsed end line

        Returns:
            Diagnostic for PARSE_LINE_BACKWARD
        """
        msg = f"End line {end_line} is before start line {start_line}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LINE_BACKWARD,
            message=msg,
            function_name="parse_link",
            details=(("start_line", str(start_line)), ("end_line", str(end_line))),
        )

    @staticmethod
    def char_backward_same_line(line: int, start_char: int, end_char: int) -> Diagnostic:
        """End column before start column on a single line.

        Args:
            line: The shared line
            start_char: Parsed start column
            end_char: Parsed end column

        Returns:
            Diagnostic for PARSE_CHAR_BACKWARD_SAME_LINE
        """
        msg = f"End column {end_char} is before start column {start_char} on line {line}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_CHAR_BACKWARD_SAME_LINE,
            message=msg,
            function_name="parse_link",
            details=(
                ("line", str(line)),
                ("start_char", str(start_char)),
                ("end_char", str(end_char)),
            ),
        )

    # ========================================================================
    # PORTABLE LINKS
    # ========================================================================

    @staticmethod
    def portable_invalid_format(block: str, reason: str) -> Diagnostic:
        """Portable block does not have the expected structure.

        Args:
            block: The metadata block (including separators)
            reason: What is wrong with it

        Returns:
            Diagnostic for BYOD_INVALID_FORMAT
        """
        msg = f"Invalid portable metadata '{block}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.BYOD_INVALID_FORMAT,
            message=msg,
            hint="Expected ~<hash>~<line>~<range>~<position>~",
            function_name="parse_portable_metadata",
            details=(("block", block),),
        )

    @staticmethod
    def portable_hash_invalid(value: str) -> Diagnostic:
        """Embedded hash is not a single character.

        Args:
            value: The embedded hash

        Returns:
            Diagnostic for BYOD_HASH_INVALID
        """
        msg = f"Portable hash must be exactly one character: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.BYOD_HASH_INVALID,
            message=msg,
            function_name="parse_portable_metadata",
            details=(("value", value),),
        )

    @staticmethod
    def portable_delimiter_validation(summary: str) -> Diagnostic:
        """Embedded delimiters fail validation.

        Args:
            summary: Joined messages of the validation issues

        Returns:
            Diagnostic for BYOD_DELIMITER_VALIDATION
        """
        msg = f"Portable delimiters are invalid: {summary}"
        return Diagnostic(
            code=DiagnosticCode.BYOD_DELIMITER_VALIDATION,
            message=msg,
            function_name="parse_portable_metadata",
        )

    @staticmethod
    def portable_format_mismatch(anchor: str) -> Diagnostic:
        """Link body does not parse with the embedded delimiters.

        Args:
            anchor: Text between the hash and the metadata block

        Returns:
            Diagnostic for BYOD_FORMAT_MISMATCH
        """
        msg = f"Range '{anchor}' does not match the embedded delimiters"
        return Diagnostic(
            code=DiagnosticCode.BYOD_FORMAT_MISMATCH,
            message=msg,
            hint=ErrorTemplate._ANCHOR_SHAPE,
            function_name="parse_link",
            details=(("anchor", anchor),),
        )

    @staticmethod
    def portable_position_recovery_failed() -> Diagnostic:
        """Three-field block and no compatible position delimiter.

        Returns:
            Diagnostic for BYOD_POSITION_RECOVERY_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.BYOD_POSITION_RECOVERY_FAILED,
            message="Cannot recover a position delimiter compatible with the embedded ones",
            hint="Regenerate the link to embed all four delimiters",
            function_name="parse_portable_metadata",
        )

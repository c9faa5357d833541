"""Hypothesis strategies for delimiter configurations.

Events emitted:
- delim_hash_default={true|false}: Whether the hash is the default '#'
- delim_multichar={none|some}: Whether any delimiter is longer than one char
- delim_invalid_kind={empty|whitespace|digits|reserved}: Invalid value kind
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from rangelink.model import DelimiterConfig
from rangelink.validation import validate_delimiters

# No digits, whitespace, reserved characters, quotes or "~"
DELIMITER_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz!$%^&*+=;<>?#-_."


def delimiter_tokens(max_size: int = 3) -> st.SearchStrategy[str]:
    """Generate a single delimiter value that passes per-field checks."""
    return st.text(alphabet=DELIMITER_ALPHABET, min_size=1, max_size=max_size)


@st.composite
def valid_delimiter_configs(draw: st.DrawFn) -> DelimiterConfig:
    """Generate a DelimiterConfig that passes validate_delimiters.

    Events emitted:
    - delim_hash_default={true|false}
    - delim_multichar={none|some}
    """
    config = draw(
        st.builds(
            DelimiterConfig,
            line=delimiter_tokens(),
            position=delimiter_tokens(),
            hash=st.sampled_from(DELIMITER_ALPHABET),
            range=delimiter_tokens(),
        ).filter(lambda c: validate_delimiters(c).is_valid)
    )
    event(f"delim_hash_default={str(config.hash == '#').lower()}")
    multichar = any(len(value) > 1 for value in config.values())
    event(f"delim_multichar={'some' if multichar else 'none'}")
    return config


@st.composite
def invalid_delimiter_values(draw: st.DrawFn) -> str:
    """Generate a value that fails the per-field checks.

    Events emitted:
    - delim_invalid_kind={empty|whitespace|digits|reserved}
    """
    kind = draw(st.sampled_from(["empty", "whitespace", "digits", "reserved"]))
    event(f"delim_invalid_kind={kind}")
    token = draw(delimiter_tokens(max_size=2))
    match kind:
        case "empty":
            return draw(st.sampled_from(["", " ", "\t", "  \n"]))
        case "whitespace":
            return token + draw(st.sampled_from([" ", "\t"])) + token
        case "digits":
            return token + draw(st.sampled_from("0123456789"))
        case _:
            return token + draw(st.sampled_from("~|/\\:,@"))

"""Conversion configuration for md2mdoc.

Config is an immutable value handed to each Converter at construction time.
It is never stored in a module global or ContextVar: every Converter reads
only the config it was built with, so independent converters can run side
by side without affecting each other.

Usage:
    from md2mdoc import Converter, ConvertConfig

    converter = Converter(config=ConvertConfig(list_width="Fl"))
    for fragment in converter.convert_line("-v verbose\\n"):
        sink.write(fragment)

"""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Frozen dataclass so one instance can be shared by any number of
    converters (state lives in ConversionState, not here).

    Attributes:
        strip_leading_whitespace: Initial value of the per-stream whitespace
            stripping mode for plain text lines
        list_width: Argument of ``-width`` on the ``.Bl -tag`` list macro
        literal_offset: Argument of ``-offset`` on the ``.Bd -literal`` macro
        section: Manual section used as the file suffix for batch output

    """

    strip_leading_whitespace: bool = True
    list_width: str = "Ds"
    literal_offset: str = "indent"
    section: str = "1"

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ConvertConfig":
        """Create ConvertConfig from dictionary.

        Only includes keys that are valid ConvertConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ConvertConfig.from_dict({
            ...     "section": "8",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.section
            '8'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


DEFAULT_CONFIG: ConvertConfig = ConvertConfig()

"""
All configuration flags, options, settings to fine-tune the change tracking.

All settings are grouped semantically just for convenience
(instead of a flat mega-object with all the values in it).

Some of the settings are flags, some are scalars, some are optional,
some are not (but all of them have reasonable defaults).

The settings can be passed explicitly to the functions that need them,
or set once as the "current" ones for the whole context via `settings_var`
(e.g. at the application's startup, or in a request-scoped task).
The explicitly passed settings always take precedence.
"""
import contextvars
import dataclasses
from typing import Optional, Tuple


@dataclasses.dataclass
class SerializationSettings:
    """
    Settings for encoding the pending changes into the request bodies.
    """

    separators: Tuple[str, str] = (',', ':')
    """
    The item & key separators, as in `json.dumps`.

    The default is the most compact form, with no whitespace at all,
    since the payloads are sent over the wire and never read by humans.
    Use ``(', ', ': ')`` for the readable form (e.g. in the debug logs).
    """

    ensure_ascii: bool = False
    """
    Should all non-ASCII characters be escaped as ``\\uXXXX`` sequences?

    The remote API accepts UTF-8, so the characters are kept as is by default.
    """

    sort_keys: bool = False
    """
    Should the keys be sorted in the output?

    By default, the keys go in the order of the first change of each field.
    Sorting helps to compare the payloads textually (e.g. in the tests).
    """


@dataclasses.dataclass
class ParsingSettings:
    """
    Settings for interpreting the documents received from the remote API.
    """

    log_unknown: bool = False
    """
    Should the members with no parser in a parser table be logged?

    The remote API adds new fields from time to time, and the entities
    silently ignore the fields they do not know. For the investigation
    of what is actually received, such members can be logged at debug level.
    """


@dataclasses.dataclass
class Settings:
    serialization: SerializationSettings = dataclasses.field(default_factory=SerializationSettings)
    parsing: ParsingSettings = dataclasses.field(default_factory=ParsingSettings)


settings_var: contextvars.ContextVar[Settings] = contextvars.ContextVar('settings_var')


def current(settings: Optional[Settings] = None) -> Settings:
    """
    Get the effective settings: explicit, or contextual, or the defaults.
    """
    if settings is not None:
        return settings
    try:
        return settings_var.get()
    except LookupError:
        return Settings()

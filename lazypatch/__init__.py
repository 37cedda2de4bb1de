"""
The main lazypatch module for all the exported functions & classes.
"""
# isort: skip_file

# Unlike all other places, where we import other modules and refer
# the functions via the modules, this is the library's top-level interface,
# as it is seen by the users. So, we export the individual functions.

from lazypatch.engines.loggers import (
    LogFormat,
    NodeLogger,
    configure,
)
from lazypatch.helpers.typedefs import (
    Logger,
)
from lazypatch.helpers.versions import (
    version as __version__,
)
from lazypatch.structs.configuration import (
    Settings,
    SerializationSettings,
    ParsingSettings,
    settings_var,
)
from lazypatch.structs.converters import (
    ConversionError,
    parse_datetime,
    format_datetime,
    parse_int,
    parse_float,
    parse_bool,
)
from lazypatch.structs.documents import (
    JSONValue,
    RawDocument,
    Document,
    MalformedDocumentError,
    decode,
    encode,
)
from lazypatch.structs.nodes import (
    ChangeTrackingNode,
    FieldChange,
    ScalarChange,
    NestedChange,
)
from lazypatch.structs.parsers import (
    MemberParser,
    MemberParsers,
    BoundMemberParser,
)

__all__ = [
    'LogFormat', 'NodeLogger', 'configure',
    'Logger',
    'Settings', 'SerializationSettings', 'ParsingSettings', 'settings_var',
    'ConversionError',
    'parse_datetime', 'format_datetime',
    'parse_int', 'parse_float', 'parse_bool',
    'JSONValue', 'RawDocument', 'Document',
    'MalformedDocumentError', 'decode', 'encode',
    'ChangeTrackingNode', 'FieldChange', 'ScalarChange', 'NestedChange',
    'MemberParser', 'MemberParsers', 'BoundMemberParser',
]

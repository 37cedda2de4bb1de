"""
All the structures coming from/to the remote API.

The documents are JSON objects: ordered mappings of member names to values,
where the values are JSON-typed (objects, arrays, strings, numbers,
booleans, and ``null``). They are represented as plain dicts, as decoded
by the `json` module. Arbitrary 3rd-party classes are not supported.

The decoding of the text is the boundary of the library: everything beyond
`decode` assumes that the documents are well-formed. The malformed input
is reported there, before any node or entity ever sees the data.
"""
import collections.abc
import json
from typing import Any, Dict, List, Mapping, Optional, Union

from lazypatch.structs import configuration

JSONScalar = Union[None, bool, int, float, str]
JSONValue = Union[JSONScalar, Mapping[str, Any], List[Any]]

# As received from the remote API; not modified by the library.
RawDocument = Mapping[str, Any]

# As produced by the library for sending; owned by the caller once returned.
Document = Dict[str, Any]


class MalformedDocumentError(ValueError):
    """
    The text cannot be interpreted as a JSON object.

    Raised for both the syntactically invalid JSON and for the valid JSON
    that is not an object at the top level (e.g. an array, a number).
    The original text is kept for the investigation; the underlying
    decoder's error, if any, is chained as the cause.
    """

    def __init__(self, message: str, *, text: Union[str, bytes, bytearray, None] = None) -> None:
        super().__init__(message)
        self.text = text


def decode(text: Union[str, bytes, bytearray]) -> Document:
    """
    Decode a JSON document as received from the remote API.
    """
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedDocumentError(f"The document is not a valid JSON: {e}", text=text) from e

    if not isinstance(document, collections.abc.Mapping):
        kind = type(document).__name__
        raise MalformedDocumentError(f"The document is not a JSON object: {kind}", text=text)
    return document


def encode(
        document: Mapping[str, Any],
        *,
        settings: Optional[configuration.Settings] = None,
) -> str:
    """
    Encode a JSON document for sending to the remote API.
    """
    serialization = configuration.current(settings).serialization
    return json.dumps(
        document,
        separators=serialization.separators,
        ensure_ascii=serialization.ensure_ascii,
        sort_keys=serialization.sort_keys,
    )

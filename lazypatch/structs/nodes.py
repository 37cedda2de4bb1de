"""
The change-tracking nodes: the pending changes of the entities.

Every entity keeps its pending changes in a node, and sends them
to the remote API as a partial update: only the changed fields
are included in the request body, never the whole entity.

The changes are of two kinds:

* The scalar changes: the new value is known right away (a string,
  a number, a boolean, ``null``, or a structured leaf such as a list
  of tags); it is stored as is and goes to the request body as a copy.

* The nested changes: the new value is another entity, which has
  its own node. The child node is remembered by reference, and its own
  pending changes are composed only when the parent's ones are requested.
  So the child can be modified after it is assigned to the parent,
  and these modifications are still sent with the parent's changes::

      file = lazypatch.ChangeTrackingNode()
      folder = lazypatch.ChangeTrackingNode()
      file.add_nested_change('parent', folder)
      folder.add_change('id', '123')
      file.get_pending_document()  # {'parent': {'id': '123'}}

Both kinds live in one ordered map of the field names to the changes,
so the last change of a field wins regardless of its kind.

The nodes are not thread-safe: a node, and all the nodes reachable from it,
must be used from one thread/task at a time, or protected externally.
"""
import copy
import logging
from typing import Any, Dict, NamedTuple, Optional, Union

from lazypatch.helpers import typedefs
from lazypatch.structs import configuration, documents, parsers

default_logger = logging.getLogger(__name__)


class ScalarChange(NamedTuple):
    value: Any


class NestedChange(NamedTuple):
    node: "ChangeTrackingNode"


FieldChange = Union[ScalarChange, NestedChange]


class ChangeTrackingNode:
    """
    The pending changes of one entity, with the nested entities' ones.

    A node is either clean (nothing to send) or has the pending changes.
    A new node is clean. It becomes clean again either explicitly
    (`clear_pending_changes`), or when it is updated from a server document,
    which establishes a new baseline with no local changes.
    """
    _changes: Dict[str, FieldChange]
    _parser: parsers.MemberParser
    _logger: typedefs.Logger

    def __init__(
            self,
            __src: Optional[documents.RawDocument] = None,
            *,
            parser: Optional[parsers.MemberParser] = None,
            logger: Optional[typedefs.Logger] = None,
    ) -> None:
        super().__init__()
        self._changes = {}
        self._parser = parser if parser is not None else parsers.ignore
        self._logger = logger if logger is not None else default_logger
        if __src is not None:
            self.update(__src)

    @classmethod
    def from_json(
            cls,
            text: Union[str, bytes, bytearray],
            *,
            parser: Optional[parsers.MemberParser] = None,
            logger: Optional[typedefs.Logger] = None,
    ) -> "ChangeTrackingNode":
        return cls(documents.decode(text), parser=parser, logger=logger)

    def __repr__(self) -> str:
        document = self.get_pending_document()
        return f"{self.__class__.__name__}()" if document is None else \
               f"{self.__class__.__name__}({document!r})"

    def __bool__(self) -> bool:
        return self.has_pending_changes

    @property
    def has_pending_changes(self) -> bool:
        return bool(self._changes)

    def add_change(self, key: str, value: Any) -> None:
        """
        Remember a new value of a field, to be sent with the pending changes.

        The value is a JSON scalar or a structured JSON value. It is stored
        by reference and copied only when the pending changes are composed.
        If the value is a node itself, it is remembered as a nested change.
        """
        if isinstance(value, ChangeTrackingNode):
            self.add_nested_change(key, value)
        else:
            self._changes[key] = ScalarChange(value)

    def add_nested_change(self, key: str, node: "ChangeTrackingNode") -> None:
        """
        Remember a child node, whose own changes will be composed on demand.
        """
        if not isinstance(node, ChangeTrackingNode):
            raise TypeError(f"A nested change must be a {ChangeTrackingNode.__name__}. Got {node!r}")
        self._changes[key] = NestedChange(node)

    def clear_pending_changes(self) -> None:
        self._changes.clear()

    def get_pending_document(self) -> Optional[documents.Document]:
        """
        Compose the pending changes into a new JSON document.

        ``None`` means that there is nothing to send. The nested nodes with
        nothing pending are reported as empty objects: the field was assigned,
        so it is mentioned, but the assigned entity has nothing to change.
        An explicit ``null`` is never used for them, since the remote API
        interprets ``null`` as the removal of the field's value.

        The document is independent of the node: the structured values
        are copied, so modifying the document never alters the pending changes.
        """
        if not self._changes:
            return None

        document: documents.Document = {}
        for key, change in self._changes.items():
            if isinstance(change, NestedChange):
                nested = change.node.get_pending_document()
                document[key] = nested if nested is not None else {}
            else:
                document[key] = copy.deepcopy(change.value)
        return document

    def get_pending_changes(
            self,
            *,
            settings: Optional[configuration.Settings] = None,
    ) -> Optional[str]:
        """
        Compose and encode the pending changes into a request body.

        ``None`` means that there is nothing to send, so no request is needed.
        """
        document = self.get_pending_document()
        if document is None:
            return None
        return documents.encode(document, settings=settings)

    def update(self, __src: documents.RawDocument) -> None:
        """
        Interpret a server document and establish a new baseline.

        Every member goes to the parser, except for the members with explicit
        ``null`` values: they are treated as absent, not as removed values.
        Whatever was pending before, it is discarded afterwards.
        """
        skipped = 0
        for name, value in __src.items():
            if value is None:
                skipped += 1
                continue
            self._parser(name, value)

        if self._changes:
            self._logger.debug(f"Discarding the pending changes of {sorted(self._changes)!r} "
                               f"after the update from the document.")
        self._logger.debug(f"Updated from {len(__src) - skipped} members, skipped {skipped} nulls.")
        self.clear_pending_changes()

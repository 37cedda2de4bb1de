"""
The per-member parsers of the documents received from the remote API.

A node does not know the schemas of the entities. When it is updated
from a server document, it passes every present member to a parser:
a callable ``(name, value) -> None``, which interprets the member
and stores the typed value in the entity it belongs to.

The parsers are usually declared once per entity type as a table
of callbacks, each for its own member, and bound to the entity instances::

    parsers = lazypatch.MemberParsers()

    class File:
        def __init__(self, document=None):
            self.name = None
            self.changes = lazypatch.ChangeTrackingNode(parser=parsers.bind(self))
            if document is not None:
                self.changes.update(document)

    @parsers.member('name')
    def _parse_name(file, value):
        file.name = value

The tables of the derived entity types can extend the tables of the base ones
(e.g. the files and the folders both have the common members of the items).
"""
import logging
from typing import Any, Callable, Dict, FrozenSet, Generic, Optional, TypeVar

from typing_extensions import Protocol

from lazypatch.structs import configuration

logger = logging.getLogger(__name__)

EntityT = TypeVar('EntityT')

MemberFn = Callable[[EntityT, Any], None]
FallbackFn = Callable[[EntityT, str, Any], None]


class MemberParser(Protocol):
    def __call__(self, __name: str, __value: Any) -> None: ...


def ignore(name: str, value: Any) -> None:
    """ The default parser: all members are unknown, and so are ignored. """


class MemberParsers(Generic[EntityT]):
    """
    A table of member parsers for one entity type.

    The lookup goes from the most specific to the least specific:
    the own callbacks, the base tables' callbacks, the own fallback,
    the base tables' fallback. The unknown members are ignored.
    """
    _callbacks: Dict[str, MemberFn[EntityT]]
    _fallback: Optional[FallbackFn[EntityT]]

    def __init__(self, *, base: Optional["MemberParsers[Any]"] = None) -> None:
        super().__init__()
        self._base = base
        self._callbacks = {}
        self._fallback = None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {sorted(self.names)!r}>"

    @property
    def names(self) -> FrozenSet[str]:
        """ All the member names known to this table, including the base ones. """
        names = frozenset(self._callbacks)
        return names | self._base.names if self._base is not None else names

    def register(self, name: str, fn: MemberFn[EntityT]) -> MemberFn[EntityT]:
        self._callbacks[name] = fn
        return fn

    def member(self, name: str) -> Callable[[MemberFn[EntityT]], MemberFn[EntityT]]:
        """ A decorator to register a callback for the named member. """
        def decorator(fn: MemberFn[EntityT]) -> MemberFn[EntityT]:
            return self.register(name, fn)
        return decorator

    def fallback(self, fn: FallbackFn[EntityT]) -> FallbackFn[EntityT]:
        """ A decorator to register a callback for all the unknown members. """
        self._fallback = fn
        return fn

    def get_callback(self, name: str) -> Optional[MemberFn[EntityT]]:
        if name in self._callbacks:
            return self._callbacks[name]
        elif self._base is not None:
            return self._base.get_callback(name)
        else:
            return None

    def get_fallback(self) -> Optional[FallbackFn[EntityT]]:
        if self._fallback is not None:
            return self._fallback
        elif self._base is not None:
            return self._base.get_fallback()
        else:
            return None

    def parse(
            self,
            entity: EntityT,
            name: str,
            value: Any,
            *,
            settings: Optional[configuration.Settings] = None,
    ) -> bool:
        """
        Interpret one member for the entity. Returns whether it was handled.
        """
        callback = self.get_callback(name)
        if callback is not None:
            callback(entity, value)
            return True

        fallback = self.get_fallback()
        if fallback is not None:
            fallback(entity, name, value)
            return True

        if configuration.current(settings).parsing.log_unknown:
            logger.debug(f"Ignoring an unknown member {name!r} of {type(entity).__name__}.")
        return False

    def bind(
            self,
            entity: EntityT,
            *,
            settings: Optional[configuration.Settings] = None,
    ) -> MemberParser:
        return BoundMemberParser(self, entity, settings=settings)


class BoundMemberParser(Generic[EntityT]):
    """ A parser table with a specific entity, as used by the nodes. """

    def __init__(
            self,
            parsers: MemberParsers[EntityT],
            entity: EntityT,
            *,
            settings: Optional[configuration.Settings] = None,
    ) -> None:
        super().__init__()
        self.parsers = parsers
        self.entity = entity
        self.settings = settings

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} of {type(self.entity).__name__}>"

    def __call__(self, name: str, value: Any) -> None:
        self.parsers.parse(self.entity, name, value, settings=self.settings)

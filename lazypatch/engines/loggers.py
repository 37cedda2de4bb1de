"""
Logging of the nodes' activities, with the entities' references.

The nodes log what they do with the pending changes at the debug level
(which is silent by default). If a node is given a `NodeLogger`,
the log records carry the reference to the entity (e.g. its type and id),
so that the messages of many entities can be told apart in the logs:
either as a prefix of the plain-text messages, or as a separate field
of the JSON-formatted records.
"""
import copy
import enum
import logging
from typing import Any, Mapping, MutableMapping, Optional, Tuple

import pythonjsonlogger.core
import pythonjsonlogger.json

from lazypatch.helpers import typedefs

DEFAULT_JSON_REFKEY = 'entity'
""" A key for entity references in JSON logs, as seen by the log parsers. """


class LogFormat(enum.Enum):
    """ Log formats, as accepted by `configure`. """
    PLAIN = '%(message)s'
    FULL = '[%(asctime)s] %(name)-20.20s [%(levelname)-8.8s] %(message)s'
    JSON = 'json'


class NodeFormatter(logging.Formatter):
    pass


class NodeTextFormatter(NodeFormatter, logging.Formatter):
    pass


class NodeJsonFormatter(NodeFormatter, pythonjsonlogger.json.JsonFormatter):  # type: ignore
    def __init__(
            self,
            *args: Any,
            refkey: Optional[str] = None,
            **kwargs: Any,
    ) -> None:
        # Avoid type checking, as the args are not in the parent constructor.
        reserved_attrs = kwargs.pop('reserved_attrs', pythonjsonlogger.core.RESERVED_ATTRS)
        reserved_attrs = set(reserved_attrs)
        reserved_attrs |= {'node_ref'}
        kwargs.update(reserved_attrs=reserved_attrs)
        kwargs.setdefault('timestamp', True)
        super().__init__(*args, **kwargs)
        self._refkey: str = refkey or DEFAULT_JSON_REFKEY

    def add_fields(
            self,
            log_record: MutableMapping[str, Any],
            record: logging.LogRecord,
            message_dict: MutableMapping[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if self._refkey and hasattr(record, 'node_ref'):
            ref = getattr(record, 'node_ref')
            log_record[self._refkey] = ref

        if 'severity' not in log_record:
            log_record['severity'] = (
                "debug" if record.levelno <= logging.DEBUG else
                "info" if record.levelno <= logging.INFO else
                "warn" if record.levelno <= logging.WARNING else
                "error" if record.levelno <= logging.ERROR else
                "fatal")


class NodePrefixingMixin(NodeFormatter):
    def format(self, record: logging.LogRecord) -> str:
        if hasattr(record, 'node_ref'):
            ref = getattr(record, 'node_ref')
            type_ = ref.get('type', '')
            id_ = ref.get('id', '')
            prefix = f"[{type_}/{id_}]" if type_ else f"[{id_}]"
            record = copy.copy(record)  # shallow
            record.msg = f"{prefix} {record.msg}"
        return super().format(record)


class NodePrefixingTextFormatter(NodePrefixingMixin, NodeTextFormatter):
    pass


class NodePrefixingJsonFormatter(NodePrefixingMixin, NodeJsonFormatter):
    pass


class NodeLogger(typedefs.LoggerAdapter):
    """
    A logger/adapter to carry the entity's identifiers for formatting.

    The reference is a small dict, usually with the entity's ``type`` & ``id``,
    as the remote API identifies the entities. It is copied on creation,
    so that later modifications of the source do not affect the logs.
    """

    def __init__(
            self,
            *,
            ref: Mapping[str, Any],
            logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(logger or logging.getLogger('lazypatch.entities'), dict(
            node_ref=dict(ref),
        ))

    def process(
            self,
            msg: str,
            kwargs: MutableMapping[str, Any],
    ) -> Tuple[str, MutableMapping[str, Any]]:
        # Native logging overwrites the message's extra with the adapter's extra.
        # We merge them, so that both message's & adapter's extras are available.
        kwargs["extra"] = dict(self.extra or {}, **kwargs.get('extra', {}))
        return msg, kwargs


def configure(
        debug: Optional[bool] = None,
        verbose: Optional[bool] = None,
        quiet: Optional[bool] = None,
        log_format: LogFormat = LogFormat.FULL,
        log_prefix: Optional[bool] = False,
        log_refkey: Optional[str] = None,
) -> None:
    log_level = 'DEBUG' if debug or verbose else 'WARNING' if quiet else 'INFO'
    formatter = make_formatter(log_format=log_format, log_prefix=log_prefix, log_refkey=log_refkey)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    logger.addHandler(handler)
    logger.setLevel(log_level)

    # The per-node debug messages are too verbose unless explicitly debugging.
    logging.getLogger('lazypatch').setLevel(log_level if debug or quiet else 'INFO')


def make_formatter(
        log_format: LogFormat = LogFormat.FULL,
        log_prefix: Optional[bool] = False,
        log_refkey: Optional[str] = None,
) -> NodeFormatter:
    log_prefix = log_prefix if log_prefix is not None else bool(log_format is not LogFormat.JSON)
    if log_format is LogFormat.JSON:
        if log_prefix:
            return NodePrefixingJsonFormatter(refkey=log_refkey)
        else:
            return NodeJsonFormatter(refkey=log_refkey)
    elif isinstance(log_format, LogFormat):
        if log_prefix:
            return NodePrefixingTextFormatter(log_format.value)
        else:
            return NodeTextFormatter(log_format.value)
    elif isinstance(log_format, str):
        if log_prefix:
            return NodePrefixingTextFormatter(log_format)
        else:
            return NodeTextFormatter(log_format)
    else:
        raise ValueError(f"Unsupported log format: {log_format!r}")

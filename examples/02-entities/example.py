import datetime
from typing import Any, List, Optional

import lazypatch

item_parsers: lazypatch.MemberParsers["Item"] = lazypatch.MemberParsers()
file_parsers: lazypatch.MemberParsers["File"] = lazypatch.MemberParsers(base=item_parsers)
folder_parsers: lazypatch.MemberParsers["Folder"] = lazypatch.MemberParsers(base=item_parsers)


class Item:
    """ The members common to the files and the folders. """
    parsers: lazypatch.MemberParsers[Any] = item_parsers
    type: str = 'item'

    def __init__(self, document: Optional[lazypatch.RawDocument] = None) -> None:
        super().__init__()
        self.id: Optional[str] = None
        self.name: Optional[str] = None
        self.description: Optional[str] = None
        self.tags: List[str] = []
        self.created_at: Optional[datetime.datetime] = None
        self.parent: Optional["Folder"] = None
        ref = {'type': self.type, 'id': (document or {}).get('id', '')}
        self.logger = lazypatch.NodeLogger(ref=ref)
        self.changes = lazypatch.ChangeTrackingNode(
            document, parser=self.parsers.bind(self), logger=self.logger)

    @classmethod
    def from_json(cls, text: str) -> "Item":
        return cls(lazypatch.decode(text))

    def set_name(self, name: str) -> None:
        self.name = name
        self.changes.add_change('name', name)

    def set_description(self, description: Optional[str]) -> None:
        self.description = description
        self.changes.add_change('description', description)

    def set_tags(self, tags: List[str]) -> None:
        self.tags = list(tags)
        self.changes.add_change('tags', list(tags))

    def move_to(self, folder: "Folder") -> None:
        self.parent = folder
        self.changes.add_nested_change('parent', folder.changes)


class File(Item):
    parsers = file_parsers
    type = 'file'

    def __init__(self, document: Optional[lazypatch.RawDocument] = None) -> None:
        self.size: Optional[int] = None
        self.content_modified_at: Optional[datetime.datetime] = None
        super().__init__(document)

    def set_content_modified_at(self, value: datetime.datetime) -> None:
        self.content_modified_at = value
        self.changes.add_change('content_modified_at', lazypatch.format_datetime(value))


class Folder(Item):
    parsers = folder_parsers
    type = 'folder'

    @classmethod
    def reference(cls, id: str) -> "Folder":
        """ A folder known only by its id, e.g. as the target of a move. """
        folder = cls({'id': id})
        folder.changes.add_change('id', id)
        return folder


@item_parsers.member('id')
def _parse_id(item: Item, value: Any) -> None:
    item.id = value


@item_parsers.member('name')
def _parse_name(item: Item, value: Any) -> None:
    item.name = value


@item_parsers.member('description')
def _parse_description(item: Item, value: Any) -> None:
    item.description = value


@item_parsers.member('tags')
def _parse_tags(item: Item, value: Any) -> None:
    item.tags = list(value)


@item_parsers.member('created_at')
def _parse_created_at(item: Item, value: Any) -> None:
    item.created_at = lazypatch.parse_datetime(value)


@item_parsers.member('parent')
def _parse_parent(item: Item, value: Any) -> None:
    item.parent = Folder(value)


@file_parsers.member('size')
def _parse_size(file: File, value: Any) -> None:
    file.size = lazypatch.parse_int(value)


@file_parsers.member('content_modified_at')
def _parse_content_modified_at(file: File, value: Any) -> None:
    file.content_modified_at = lazypatch.parse_datetime(value)


RESPONSE = """
{
    "type": "file",
    "id": "42",
    "name": "Report.pdf",
    "description": "Quarterly report",
    "tags": ["finance"],
    "size": 12345,
    "created_at": "2024-05-01T12:34:56-07:00",
    "content_modified_at": "2024-05-02T08:00:00-07:00",
    "parent": {"type": "folder", "id": "0", "name": "All Files"},
    "shared_link": null
}
"""


if __name__ == '__main__':
    lazypatch.configure(debug=True, log_prefix=True)
    file = File.from_json(RESPONSE)
    file.set_name('Report-Q2.pdf')
    target = Folder.reference('123')
    file.move_to(target)
    print(file.changes.get_pending_changes())

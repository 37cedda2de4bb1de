"""
All the data structures of the change tracking: the nodes and the documents,
the parsers of the documents, and the settings of all of these.

The structs do not do any I/O. The documents come from and go to
the transport layer of the application, which is out of this library.
"""

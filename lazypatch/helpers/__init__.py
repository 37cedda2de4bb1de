"""
General-purpose helpers not related to the change tracking itself,
which are used to prepare and control the runtime environment.

Helpers do not depend on anything else in the library. They could be
extracted as reusable libraries as they are.
"""

"""
Engines are things that run around the nodes to help them function,
but are not part of them: e.g. the logging of the nodes' activities.
"""

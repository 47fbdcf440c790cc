"""
Support code for the taskers: the task graph, action builders,
test detection and report file handling.
"""

"""
testbook: example functions and case tables used by the chapters on testing technique.
"""

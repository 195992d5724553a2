"""
Test package root.

Only this directory has an __init__.py, so `tests.helpers` can be imported from any test
module. The test subdirectories are namespace packages (PEP 420) and need no __init__.py.
"""

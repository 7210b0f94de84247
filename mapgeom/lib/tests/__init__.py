"""
This file is also needed for the correct work of relative imports in the tests.
"""

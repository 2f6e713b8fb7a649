"""b64buffer tests.

NOTE: This file is only considered when running tests via aggregate_tests.py, or
with the '-m' flag, when invoked individually.

"""

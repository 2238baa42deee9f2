"""
Test utilities package.

Shared fakes and data generators live in ``tests.test_framework``. Nothing is
imported here so that conftest can put ``src`` on the path first.
"""

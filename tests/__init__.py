"""
Test suite for optionstore.

Tests are organized to mirror ``src/optionstore``:

- core/: whitelist, type tags, coercion and the store
- core/utils/: logging and settings
- fixtures/: caller-defined option types shared by the tests
"""

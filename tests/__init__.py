"""
Test Suite for exampledata

- Unit tests for schema, config, generator, loader and validator
- CLI tests covering the end-to-end generate-and-write run
"""

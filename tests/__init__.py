"""
Test Suite for Mock Data Generator

Provides tests for:
- Field and user generators
- Output formatting (JSON, CSV)
- Request orchestration and entry points
- Configuration management
- CLI and HTTP API
"""

"""
Test suite for Project Viewer.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_view_service.py -v
"""

"""
Test suite for the GDAX client.

Run all tests from project root:
    pytest
    pytest tests/
    pytest tests/test_gdax/

Run specific test file:
    pytest tests/test_gdax/test_auth.py

Run with coverage:
    pytest --cov=gdax --cov-report=html
"""

"""
Posts API Smoke-Test Harness

Shallow CRUD checks against a public REST API with Allure attachments
recorded for every HTTP exchange.
"""

__version__ = "1.0.0"

"""Shared test data"""
from pathlib import Path

FIXTURES = Path(__file__).parent / 'fixtures'

LOGIN_SPEC = FIXTURES / 'login.spec.ts'
CART_SPEC = FIXTURES / 'cart.spec.js'

LOGIN_GHERKIN = '''Feature: Login

  Background:
    Given load "https://example.com/login" login page

  Scenario: valid login
    Given enter "testuser" username
    When enter "the password field" password
    And click "the login-button field" login button
    Then verify "the dashboard element" dashboard visible

  Scenario: empty case'''


def read(path: Path) -> str:
    return path.read_text(encoding='utf-8')

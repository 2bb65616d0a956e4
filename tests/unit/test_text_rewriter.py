"""Unit tests for step text rewriting"""
import pytest

from bddbridge.converter.text_rewriter import (
    apply_prefix_rules, describe_selectors, rewrite_step_text, splice_literals
)


def step_code(body):
    return "await test.step('label', async () => {\n  " + body + "\n});"


def test_quotes_are_removed_from_description():
    assert rewrite_step_text('open `admin` "panel" \'now\'') == 'open admin panel now'


def test_literal_is_spliced_after_first_word():
    code = step_code("await page.keyboard.type('testuser');")

    assert rewrite_step_text('enter username', code) == 'enter "testuser" username'


def test_only_first_literal_is_spliced():
    code = step_code("await page.fill('#email', 'me@example.com');")

    assert splice_literals('fill email', code) == 'fill "#email" email'


def test_step_label_is_not_spliced():
    code = "await test.step('search products', async () => {\n});"

    assert splice_literals('search products', code) == 'search products'


def test_empty_literal_is_ignored():
    code = step_code("await page.fill('#q', '');")

    assert splice_literals('clear query', code) == 'clear "#q" query'


def test_single_word_description_gets_literal():
    code = step_code("await page.fill('#u', 'admin');")

    assert splice_literals('login', code) == 'login "#u"'


def test_literal_is_spliced_before_selector_token():
    code = step_code("await page.click('#email');")

    assert splice_literals('fill #email', code) == 'fill "#email" #email'
    assert rewrite_step_text('fill #email', code) == 'fill "the email field" #email'


def test_description_without_word_start_is_unchanged():
    code = step_code("await page.goto('/home');")

    assert splice_literals('#menu', code) == '#menu'


@pytest.mark.parametrize('text,expected', [
    ('#username is empty', 'the username field is empty'),
    ('focus "#search-box" now', 'focus "the search-box field" now'),
    ('.banner is hidden', 'the banner element is hidden'),
    ('open .menu and #login', 'open the menu element and the login field'),
    ('visit example.com', 'visit example.com'),
    ('issue #1 and #2', 'issue the 1 field and #2'),
])
def test_describe_selectors(text, expected):
    assert describe_selectors(text) == expected


@pytest.mark.parametrize('text,expected', [
    ('enter username', 'the user enters username'),
    ('Enter email address', 'the user enters email address'),
    ('click login button', 'the user clicks the login button'),
    ('verify dashboard', 'the dashboard should be visible'),
    ('verify dashboard visible', 'the dashboard should be visible visible'),
    ('check dashboard', 'check dashboard'),
    ('enter', 'enter'),
])
def test_prefix_rules(text, expected):
    assert apply_prefix_rules(text) == expected


def test_rules_run_in_order():
    code = step_code("await page.click('#login-button');")

    assert rewrite_step_text('click login button', code) == 'click "the login-button field" login button'


def test_code_without_literals_leaves_prefix_rules_free():
    code = step_code("await page.keyboard.press(Enter);")

    assert rewrite_step_text("click 'submit'", code) == 'the user clicks the submit'

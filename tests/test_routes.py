"""Tests for the Flask pages, calculator posts, contact form and theme toggle."""

import pytest

from content import ARTICLES, FAQS
from main import safe_next


@pytest.mark.parametrize("path, marker", [
    ("/", "Your hub for biohacking"),
    ("/blog", ARTICLES[0]["title"]),
    ("/tools", "Sleep Calculator"),
    ("/knowledge", "Knowledge Base"),
    ("/contacts", 'name="message"'),
    ("/about", "About Us"),
])
def test_pages_render(client, path, marker):
    resp = client.get(path)
    assert resp.status_code == 200
    assert marker in resp.get_data(as_text=True)


def test_nav_lists_every_page(client):
    body = client.get("/about").get_data(as_text=True)
    for path in ("/blog", "/tools", "/knowledge", "/contacts", "/about"):
        assert f'href="{path}"' in body


def test_knowledge_lists_faqs(client):
    body = client.get("/knowledge").get_data(as_text=True)
    for question, _ in FAQS:
        assert question in body


def test_unknown_page_is_404(client):
    assert client.get("/shop").status_code == 404


def test_bmi_post_shows_result(client):
    resp = client.post("/bmi", data={"height": "180", "weight": "80", "page": "tools"})
    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "Your BMI is <strong>24.7</strong>" in body
    assert 'data-segments="24.7,15.3"' in body
    assert 'value="180"' in body


def test_bmi_post_renders_on_home_when_asked(client):
    body = client.post("/bmi", data={"height": "180", "weight": "80", "page": "home"}).get_data(as_text=True)
    assert "Your hub for biohacking" in body
    assert "24.7" in body


def test_bmi_post_unknown_page_falls_back_to_tools(client):
    body = client.post("/bmi", data={"height": "180", "weight": "80", "page": "admin"}).get_data(as_text=True)
    assert "Your hub for biohacking" not in body
    assert "Your BMI is" in body


def test_bmi_post_zero_height_shows_error(client):
    resp = client.post("/bmi", data={"height": "0", "weight": "80"})
    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "Height must be a positive number." in body
    assert "Your BMI is" not in body


def test_bmi_post_tiny_height_shows_error(client):
    resp = client.post("/bmi", data={"height": "1e-200", "weight": "70"})
    assert resp.status_code == 200
    assert "Height is too small to compute a BMI." in resp.get_data(as_text=True)


def test_sleep_post_non_ascii_digits_shows_error(client):
    resp = client.post("/sleep", data={"bed": "\u00b2:00", "wake": "07:00"})
    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "is not a valid time" in body
    assert "You sleep" not in body


def test_bmi_post_missing_weight(client):
    body = client.post("/bmi", data={"height": "170"}).get_data(as_text=True)
    assert "Please enter your weight." in body


def test_sleep_post_overnight(client):
    body = client.post("/sleep", data={"bed": "23:00", "wake": "07:00"}).get_data(as_text=True)
    assert "You sleep 8.0 hours" in body


def test_sleep_post_equal_times(client):
    body = client.post("/sleep", data={"bed": "06:00", "wake": "06:00"}).get_data(as_text=True)
    assert "You sleep 0.0 hours" in body


def test_sleep_post_bad_time(client):
    body = client.post("/sleep", data={"bed": "", "wake": "07:00"}).get_data(as_text=True)
    assert "Please enter both times." in body
    assert "You sleep" not in body


def test_contact_invalid_shows_errors_and_keeps_values(client, sender):
    resp = client.post("/contacts", data={"name": "Jo", "email": "bad", "message": ""})
    body = resp.get_data(as_text=True)
    assert "Invalid email" in body
    assert "Required" in body
    assert 'value="Jo"' in body
    assert "Submitted!" not in body
    sender.assert_not_called()


def test_contact_valid_is_delivered(client, sender):
    data = {"name": "Jo", "email": "a@b.com", "message": "hi"}
    body = client.post("/contacts", data=data).get_data(as_text=True)
    assert "Submitted!" in body
    sender.assert_called_once_with(data)


def test_theme_defaults_to_light(client):
    body = client.get("/").get_data(as_text=True)
    assert 'class="light"' in body
    assert "#ffffff" in body


def test_theme_toggle_sets_cookie_and_redirects(client):
    resp = client.post("/theme", data={"next": "/blog"})
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/blog")
    cookies = resp.headers.getlist("Set-Cookie")
    assert any(c.startswith("darkMode=true") for c in cookies)

    body = client.get("/blog").get_data(as_text=True)
    assert 'class="dark"' in body
    assert "#121212" in body


def test_theme_toggle_back_to_light(client):
    client.post("/theme", data={"next": "/"})
    resp = client.post("/theme", data={"next": "/"})
    assert any(c.startswith("darkMode=false") for c in resp.headers.getlist("Set-Cookie"))
    assert 'class="light"' in client.get("/").get_data(as_text=True)


@pytest.mark.parametrize("target, expected", [
    ("/tools", "/tools"),
    (None, "/"),
    ("", "/"),
    ("https://evil.example/", "/"),
    ("//evil.example/", "/"),
    ("/\\evil.example", "/"),
    ("/\\/evil.example", "/"),
    ("/tools\\sub", "/tools\\sub"),
])
def test_safe_next(target, expected):
    assert safe_next(target) == expected

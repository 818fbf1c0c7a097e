from pathlib import Path

from streamlit.testing.v1 import AppTest


LOGIN_PAGE = str(Path(__file__).parents[3] / 'pfd' / 'app' / 'pages' / 'login.py')


def test_login_page():
    at = AppTest.from_file(LOGIN_PAGE)
    at.run()
    assert not at.exception
    assert len(at.tabs) == 2
    assert len(at.text_input) == 5


def test_sign_in_without_credentials():
    at = AppTest.from_file(LOGIN_PAGE)
    at.run()
    at.button[0].click().run()
    assert at.error[0].value == "Please enter your email and password"

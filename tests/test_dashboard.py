"""
Smoke tests for the Streamlit form, driven through streamlit's AppTest
Run with: pytest tests/test_dashboard.py -v
"""

import pytest
from streamlit.testing.v1 import AppTest

APP = "../dashboard/app.py"


@pytest.fixture
def app(monkeypatch):
    for var in ("DEFAULT_BANKROLL", "DEFAULT_ODDS", "DEFAULT_ODDS_FORMAT", "DEFAULT_WIN_PROB", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    return at


class TestKellyForm:
    """The form renders the calculator's output"""

    def test_default_form(self, app):
        assert not app.exception
        assert not app.error
        values = [m.value for m in app.metric]
        assert values == ["+21.67%", "$325.00", "$162.50"]

    def test_negative_edge(self, app):
        app.text_input(key="kelly_odds").set_value("100")
        app.text_input(key="kelly_prob").set_value("40")
        app.run()

        values = [m.value for m in app.metric]
        assert values == ["-10.00%", "$0.00", "$0.00"]
        assert app.warning

    def test_invalid_bankroll(self, app):
        app.text_input(key="kelly_bankroll").set_value("abc")
        app.run()

        assert app.error[0].value == "Bankroll must be a positive number."
        assert not app.metric

    def test_decimal_format(self, app):
        app.selectbox(key="kelly_odds_format").set_value("decimal")
        app.text_input(key="kelly_odds").set_value("1.0")
        app.run()

        assert app.error[0].value == "Decimal odds must be greater than 1.0."

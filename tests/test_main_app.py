"""Smoke tests of the Streamlit app using streamlit.testing."""

from streamlit.testing.v1 import AppTest


def _app() -> AppTest:
    at = AppTest.from_file("../main.py", default_timeout=30)
    return at.run()


def test_app_renders_default_model():
    at = _app()
    assert not at.exception
    assert len(at.metric) == 1
    assert at.metric[0].value == "$50.00"


def test_app_all_models():
    at = _app()
    at.radio(key="ddm_model").set_value("all").run()
    assert not at.exception
    assert [m.value for m in at.metric][:2] == ["$50.00", "$105.00"]
    assert len(at.metric) == 3


def test_app_shows_validation_errors():
    at = _app()
    at.number_input(key="ddm_gconst").set_value(12.0).run()
    assert not at.exception
    assert len(at.error) == 1
    assert "Growth rate must be less than required return" in at.error[0].value
    assert len(at.metric) == 0

from config.settings import Settings


def test_defaults_match_calculator_defaults(monkeypatch):
    monkeypatch.delenv("DDM_DEFAULT_D0", raising=False)
    s = Settings(_env_file=None)
    assert s.default_d0 == 5.0
    assert s.default_required_pct == 10.0
    assert s.default_short_years == 5
    assert s.default_model == "constant"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DDM_DEFAULT_D0", "2.5")
    monkeypatch.setenv("DDM_MAX_SHORT_YEARS", "30")
    monkeypatch.setenv("DDM_DEFAULT_MODEL", "all")
    s = Settings(_env_file=None)
    assert s.default_d0 == 2.5
    assert s.max_short_years == 30
    assert s.default_model == "all"

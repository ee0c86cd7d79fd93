from __future__ import annotations

import logging

from compound_calc.app import create_app


def test_factory_only_configures_package_logger():
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level

    app = create_app({"LOG_LEVEL": "WARNING"})

    assert app.config["LOG_LEVEL"] == "WARNING"
    assert logging.getLogger("compound_calc").level == logging.WARNING
    assert root.handlers == handlers_before
    assert root.level == level_before


def test_cors_origins_from_environment(monkeypatch):
    monkeypatch.setenv("COMPOUND_CALC_CORS_ORIGINS", "http://a.test, http://b.test")

    app = create_app()

    assert app.config["CORS_ORIGINS"] == ["http://a.test", "http://b.test"]

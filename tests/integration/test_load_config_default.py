from __future__ import annotations

import pytest

from util.utils import load_config


@pytest.mark.integration
# What this tests
# - load_config reads configs/default.yaml and exposes the canvas/turtle/animation sections.
def test_load_config_reads_default_sections():
    cfg = load_config()
    assert cfg["canvas"]["width"] > 0
    assert cfg["turtle"]["mode"] in ("standard", "logo")
    assert cfg["animation"]["interval"] > 0

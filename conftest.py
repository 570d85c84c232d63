# -*- coding: utf-8 -*-
"""
Общие фикстуры: изолированная конфигурация для каждого теста.
"""

import pytest

from meshview.utils.config import Config


@pytest.fixture
def config(tmp_path):
    """Свежий Config во временном каталоге."""
    Config.reset()
    cfg = Config(str(tmp_path / "meshview.json"))
    yield cfg
    Config.reset()

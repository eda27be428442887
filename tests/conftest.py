"""Shared pytest configuration and fixtures for pubgraph tests."""

import sys
from pathlib import Path

import pytest

# Ensure the pubgraph package is importable without an editable install
sys.path.insert(0, str(Path(__file__).parent.parent))

from pubgraph.catalog.parser import parse_publications  # noqa: E402


SAMPLE_CSV = """Type|Author|Year|Title
artigoEmPeriodico|João Silva|2023|Inteligência Artificial na Educação
trabalhoCompletoEmCongresso|Maria Santos|2022|Sustentabilidade em Projetos
artigoEmPeriodico|João Silva|2021|State of the art review of learning analytics
livro|Ana Costa|bad|Tecnologia e Inovação
artigoEmPeriodico|Maria Santos|2019|A journal article about education
trabalhoCompletoEmCongresso|Pedro Silva Costa|2020|Inovação na Educação Tecnológica
"""


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def pubs():
    return parse_publications(SAMPLE_CSV)

"""
Fixtures compartilhados para testes do resolvedor de configuração.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos YAML semelhantes ao uso real (como texto, sem I/O)
- um "repositório" temporário onde `GitVersionConfig.yaml` pode ser escrito

Decisões arquiteturais:
    - Documentos são fornecidos como string para manter os testes explícitos
    - O repositório é um diretório temporário isolado por teste

Invariantes:
    - YAML sintaticamente válido em todas as fixtures
    - Nenhuma fixture depende de estado global

Limites explícitos:
    - Não substituir testes de integração com git
    - Não conter lógica de merge
"""

from pathlib import Path
from typing import Callable

import pytest


CONFIG_FILE_NAME = "GitVersionConfig.yaml"


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    """Diretório temporário que representa a raiz de um repositório."""
    repo = tmp_path / "MyGitRepo"
    repo.mkdir()
    return repo


@pytest.fixture
def write_config(repo_path: Path) -> Callable[[str], Path]:
    """
    Fixture que escreve o conteúdo de `GitVersionConfig.yaml` no repositório.

    Returns:
        Callable[[str], Path]: função que recebe o texto YAML e retorna o path escrito.
    """

    def _write(text: str) -> Path:
        path = repo_path / CONFIG_FILE_NAME
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def migrating_document_yaml() -> str:
    """
    Documento completo que usa apelidos de branch (`develop`, `release[/-]`).

    Usado para validar:
    - overlay de todos os escalares de nível raiz
    - normalização de apelidos para os padrões canônicos
    - parse de enums sem diferenciar caixa (`continuousDeployment`)
    """
    return """\
assembly-versioning-scheme: MajorMinor
next-version: 2.0.0
tag-prefix: '[vV|version-]'
mode: ContinuousDelivery
branches:
    develop:
        mode: ContinuousDeployment
        tag: dev
    release[/-]:
       mode: continuousDeployment
       tag: rc
"""


@pytest.fixture
def legacy_document_yaml() -> str:
    """Documento escrito no layout antigo, com três chaves legadas."""
    return """\
assemblyVersioningScheme: MajorMinor
develop-branch-tag: alpha
release-branch-tag: rc
"""

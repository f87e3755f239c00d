# tests/core/config/test_render.py
"""
Testes da renderização canônica da configuração efetiva.

A saída renderizada é usada para auditoria e comparação com saídas
aprovadas; por isso os testes comparam o texto completo com documentos
YAML esperados, e não apenas a estrutura.

Os testes asseguram que:
- a configuração padrão renderiza exatamente o documento aprovado
- branches novas e tag vazia explícita aparecem no texto aprovado
- a ordem dos campos é fixa e as chaves de branch são ordenadas
- a renderização não depende da ordem de inserção das branches
"""

import yaml

from version_config.core.config.branches import DEVELOP_PATTERN, RELEASE_PATTERN
from version_config.core.config.defaults import default_configuration
from version_config.core.config.loader import get_effective_config_as_string
from version_config.core.config.merge import resolve
from version_config.core.config.render import effective_config_dict, render_effective_config


APPROVED_DEFAULT_CONFIG = """\
assembly-versioning-scheme: MajorMinorPatch
tag-prefix: '[vV]'
mode: ContinuousDelivery
branches:
  dev(elop)?(ment)?$:
    mode: ContinuousDeployment
    tag: unstable
    increment: Minor
  releases?[/-]:
    mode: ContinuousDelivery
    tag: beta
    increment: Patch
"""

APPROVED_CUSTOM_CONFIG = """\
assembly-versioning-scheme: MajorMinorPatch
assembly-informational-format: '{FullSemVer}'
next-version: 2.0.0
tag-prefix: '[vV]'
mode: ContinuousDelivery
branches:
  bug[/-]:
    tag: bugfix
  dev(elop)?(ment)?$:
    mode: ContinuousDeployment
    tag: unstable
    increment: Minor
  releases?[/-]:
    mode: ContinuousDelivery
    tag: ''
    increment: Patch
"""


def test_can_write_out_effective_configuration(repo_path):
    """Repositório sem documento renderiza exatamente a configuração aprovada."""
    assert get_effective_config_as_string(repo_path) == APPROVED_DEFAULT_CONFIG


def test_custom_configuration_matches_approved_text():
    config = resolve(
        {
            "next-version": "2.0.0",
            "assembly-informational-format": "{FullSemVer}",
            "branches": {
                "bug[/-]": {"tag": "bugfix"},
                "release[/-]": {"tag": ""},
            },
        }
    )
    assert render_effective_config(config) == APPROVED_CUSTOM_CONFIG


def test_custom_configuration_from_repository_matches_approved_text(repo_path, write_config):
    write_config(
        "assembly-informational-format: '{FullSemVer}'\n"
        "next-version: 2.0.0\n"
        "branches:\n"
        "  release[/-]:\n"
        "    tag: ''\n"
        "  bug[/-]:\n"
        "    tag: bugfix\n"
    )
    assert get_effective_config_as_string(repo_path) == APPROVED_CUSTOM_CONFIG


def test_default_effective_config_dict():
    assert effective_config_dict(default_configuration()) == {
        "assembly-versioning-scheme": "MajorMinorPatch",
        "tag-prefix": "[vV]",
        "mode": "ContinuousDelivery",
        "branches": {
            DEVELOP_PATTERN: {
                "mode": "ContinuousDeployment",
                "tag": "unstable",
                "increment": "Minor",
            },
            RELEASE_PATTERN: {
                "mode": "ContinuousDelivery",
                "tag": "beta",
                "increment": "Patch",
            },
        },
    }


def test_field_order_is_fixed_and_branch_keys_sorted():
    config = resolve(
        {
            "mode": "ContinuousDeployment",
            "next-version": "1.0",
            "assembly-informational-format": "{FullSemVer}",
            "branches": {"zeta[/-]": {"tag": "z"}, "alpha[/-]": {"tag": ""}},
        }
    )
    out = effective_config_dict(config)

    assert list(out) == [
        "assembly-versioning-scheme",
        "assembly-informational-format",
        "next-version",
        "tag-prefix",
        "mode",
        "branches",
    ]
    assert list(out["branches"]) == sorted(out["branches"])
    assert out["branches"]["alpha[/-]"] == {"tag": ""}


def test_approved_text_parses_back_to_effective_dict():
    assert yaml.safe_load(APPROVED_DEFAULT_CONFIG) == effective_config_dict(default_configuration())


def test_rendering_does_not_depend_on_insertion_order():
    a = resolve({"branches": {"bug[/-]": {"tag": "b"}, "hotfix[/-]": {"tag": "h"}}})
    b = resolve({"branches": {"hotfix[/-]": {"tag": "h"}, "bug[/-]": {"tag": "b"}}})
    assert render_effective_config(a) == render_effective_config(b)

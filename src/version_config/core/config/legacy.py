"""
Detecção de chaves de configuração legadas.

Documentos escritos para layouts antigos não são migrados
silenciosamente: qualquer chave presente nas tabelas deste módulo
interrompe o carregamento com `OldConfigurationError`.

Política:
    - Chaves são lidas na ordem do documento; cada mapeamento de branch
      é inspecionado no ponto em que `branches` aparece
    - A ordem das violações segue a ordem de encontro no documento
    - Todas as violações são coletadas antes da falha (sem fail-fast)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional

from .document import BRANCHES_KEY, ConfigDocument
from .errors import OldConfigurationError


BRANCH_CONFIGURATION_GUIDANCE = (
    "branch specific configuration. "
    "See http://gitversion.readthedocs.org/en/latest/configuration/#branch-configuration"
)

LEGACY_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "assemblyVersioningScheme": "assembly-versioning-scheme",
    }
)

# Tags antigas por tipo de branch, sem substituto direto
LEGACY_BRANCH_TAG_KEYS = frozenset({"develop-branch-tag", "release-branch-tag"})


def _replacement_for(key: str) -> Optional[str]:
    if key in LEGACY_KEYS:
        return LEGACY_KEYS[key]
    if key in LEGACY_BRANCH_TAG_KEYS:
        return BRANCH_CONFIGURATION_GUIDANCE
    return None


def _check(key: str, violations: List[str]) -> None:
    replacement = _replacement_for(key)
    if replacement is not None:
        violations.append(f"{key} has been replaced by {replacement}")


def detect_legacy_keys(document: ConfigDocument) -> List[str]:
    """Coleta todas as violações de chaves legadas, na ordem do documento."""
    violations: List[str] = []
    for key in document.keys():
        _check(key, violations)
        if key == BRANCHES_KEY:
            # mapeamentos de branch entram no ponto em que `branches` aparece
            for _, branch in document.branches():
                for branch_key in branch.keys():
                    _check(branch_key, violations)
    return violations


def ensure_no_legacy_keys(document: ConfigDocument) -> None:
    """
    Falha se o documento contiver qualquer chave legada.

    Raises:
        OldConfigurationError: Com todas as violações agregadas.
    """
    violations = detect_legacy_keys(document)
    if violations:
        raise OldConfigurationError(violations)

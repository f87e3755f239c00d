# src/version_config/__init__.py
"""
Version Config: resolução determinística da configuração de versionamento.

Este pacote raiz define o namespace público do resolvedor de configuração
de versionamento de repositórios: o documento `GitVersionConfig.yaml` é
validado contra layouts legados, aplicado sobre a configuração padrão e
materializado como uma Configuration completa.

Arquitetura em alto nível:
    - core.config → carregamento, detecção de legado, merge, renderização e hashing

Limites explícitos:
    - Não interpreta histórico git
    - Não calcula números de versão
"""

from .core.config import (
    Configuration,
    BranchConfiguration,
    DEFAULT_TAG_PREFIX,
    get_effective_config_as_string,
    get_effective_config_hash,
    provide,
    resolve,
)

__all__ = [
    "Configuration",
    "BranchConfiguration",
    "DEFAULT_TAG_PREFIX",
    "get_effective_config_as_string",
    "get_effective_config_hash",
    "provide",
    "resolve",
]
